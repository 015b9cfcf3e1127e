from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("syllabus_graph.graph")


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str

    def to_vis(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label}


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    # vis-network "arrows" value: a direction string or a per-end dict
    arrows: Any
    label: str | None = None
    color: str | None = None
    width: int | None = None

    def to_vis(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "from": self.source,
            "to": self.target,
            "arrows": self.arrows,
            "label": self.label,
            "color": self.color,
            "width": self.width,
        }
        return {k: v for k, v in out.items() if v is not None}


@dataclass(frozen=True)
class GraphView:
    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    def to_vis(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize for a keyed vis DataSet.

        Node ids must be unique there, so a repeated id keeps the last node
        (the same outcome as DataSet.update) and the collision is logged.
        """
        by_id: dict[str, dict[str, Any]] = {}
        for node in self.nodes:
            if node.id in by_id:
                logger.warning("Duplicate course name %r; keeping the last row", node.id)
            by_id[node.id] = node.to_vis()

        return {
            "nodes": list(by_id.values()),
            "edges": [e.to_vis() for e in self.edges],
        }
