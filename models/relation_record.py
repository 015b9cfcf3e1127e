from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RelationKind(str, Enum):
    RELATED = "related"
    RECOMMENDED = "recommended"
    EQUIVALENT = "equivalent"
    REQUIRED = "required"
    EXCLUSIVE = "exclusive"

    @classmethod
    def parse(cls, raw: str) -> "RelationKind | None":
        """Return the known kind for ``raw`` or None for the fallback kind."""
        try:
            return cls(raw)
        except ValueError:
            return None


# Directed relation between two course names (relation.csv).
# kind keeps the raw text so unknown kinds can still be labelled.
@dataclass(frozen=True)
class RelationRecord:
    source: str
    target: str
    kind: str = ""

    @classmethod
    def from_row(cls, row: dict[str, str]) -> "RelationRecord":
        return cls(
            source=(row.get("source") or "").strip(),
            target=(row.get("target") or "").strip(),
            kind=(row.get("kind") or "").strip(),
        )

    def touches(self, name: str) -> bool:
        return self.source == name or self.target == name

    def __repr__(self) -> str:
        return f"<Relation {self.source} -[{self.kind}]-> {self.target}>"
