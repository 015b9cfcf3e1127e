from __future__ import annotations

from dataclasses import dataclass, fields


# One course row from syllabus.csv.
# course_name doubles as the graph node id.
@dataclass(frozen=True)
class SyllabusRecord:
    url: str = ""
    course_code: str = ""
    course_name: str = ""
    regulation_subject_name: str = ""
    campus: str = ""
    instructor: str = ""
    subject_group: str = ""
    subject_code: str = ""
    language: str = ""
    term: str = ""

    @classmethod
    def from_row(cls, row: dict[str, str]) -> "SyllabusRecord":
        # unknown columns are ignored, missing ones stay empty
        return cls(**{f.name: (row.get(f.name) or "").strip() for f in fields(cls)})

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __repr__(self) -> str:
        return f"<SyllabusRecord {self.course_code} {self.course_name}>"


SYLLABUS_FIELDS = tuple(f.name for f in fields(SyllabusRecord))
