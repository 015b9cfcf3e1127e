from __future__ import annotations

from typing import Any, Iterable, Sequence

from models.graph import GraphEdge, GraphNode, GraphView
from models.relation_record import RelationKind, RelationRecord
from models.syllabus_record import SyllabusRecord
from services.course_state import CourseGraphState

VIEW_ALL = "all"
VIEW_CONNECTED = "connected"
VIEW_NEIGHBORHOOD = "neighborhood"
VIEWS = (VIEW_ALL, VIEW_CONNECTED, VIEW_NEIGHBORHOOD)

# Edge appearance per relation kind: (arrows, label, color, width).
# "from" draws the head at the source end, i.e. a reversed arrow.
EDGE_STYLES: dict[RelationKind, tuple[Any, str | None, str | None, int | None]] = {
    RelationKind.RELATED: ({"to": {"enabled": True, "scaleFactor": 0.5}}, None, None, None),
    RelationKind.RECOMMENDED: ("from", "desirable", None, None),
    RelationKind.EQUIVALENT: ("from", "prerequisite knowledge", "red", None),
    RelationKind.REQUIRED: ("to", "mandatory", "red", 2),
    RelationKind.EXCLUSIVE: ("from", "cannot co-enroll", "magenta", 2),
}


def edge_style(kind: str) -> tuple[Any, str | None, str | None, int | None]:
    known = RelationKind.parse(kind)
    if known is None:
        # unknown kinds: plain forward arrow labelled with the raw kind
        return "to", kind, None, None
    return EDGE_STYLES[known]


def _node(name: str) -> GraphNode:
    return GraphNode(id=name, label=name)


def project_nodes(syllabus: Iterable[SyllabusRecord]) -> list[GraphNode]:
    # no de-dup here, see GraphView.to_vis
    return [_node(rec.course_name) for rec in syllabus]


def project_edge(rel: RelationRecord) -> GraphEdge:
    arrows, label, color, width = edge_style(rel.kind)
    return GraphEdge(
        source=rel.source,
        target=rel.target,
        arrows=arrows,
        label=label,
        color=color,
        width=width,
    )


def project_edges(relations: Iterable[RelationRecord]) -> list[GraphEdge]:
    return [project_edge(rel) for rel in relations]


def _endpoint_names(relations: Iterable[RelationRecord]) -> list[str]:
    # distinct names in first-appearance order
    seen: dict[str, None] = {}
    for rel in relations:
        seen.setdefault(rel.source)
        seen.setdefault(rel.target)
    return list(seen)


def connected_nodes(relations: Iterable[RelationRecord]) -> list[GraphNode]:
    """Nodes for every course that has at least one relation.

    Isolated courses drop out; components are not partitioned.
    """
    return [_node(name) for name in _endpoint_names(relations)]


def neighborhood(relations: Sequence[RelationRecord], name: str) -> GraphView:
    """Closed 1-hop neighborhood of ``name`` with its induced edges.

    Edges between two neighbors are included even when neither end is
    ``name`` itself. ``name`` is always present, related or not.
    """
    names: dict[str, None] = {name: None}
    for rel in relations:
        if rel.touches(name):
            names.setdefault(rel.source)
            names.setdefault(rel.target)

    induced = [rel for rel in relations if rel.source in names and rel.target in names]
    return GraphView(
        nodes=tuple(_node(n) for n in names),
        edges=tuple(project_edges(induced)),
    )


def full_graph(state: CourseGraphState) -> GraphView:
    return GraphView(
        nodes=tuple(project_nodes(state.syllabus)),
        edges=tuple(project_edges(state.relations)),
    )


def connected_graph(state: CourseGraphState) -> GraphView:
    # every relation has both ends in the connected set, so all edges stay
    return GraphView(
        nodes=tuple(connected_nodes(state.relations)),
        edges=tuple(project_edges(state.relations)),
    )


def neighborhood_graph(state: CourseGraphState, name: str) -> GraphView:
    return neighborhood(state.relations, name)


def build_view(state: CourseGraphState, view: str, course: str | None = None) -> GraphView:
    """Regenerate the displayed graph from the datasets and a filter.

    Raises ValueError for an unknown view or a neighborhood without a course.
    """
    if view == VIEW_ALL:
        return full_graph(state)
    if view == VIEW_CONNECTED:
        return connected_graph(state)
    if view == VIEW_NEIGHBORHOOD:
        if not course:
            raise ValueError("The neighborhood view needs a course name.")
        return neighborhood_graph(state, course)
    raise ValueError(f"Unknown view {view!r}; expected one of {', '.join(VIEWS)}.")
