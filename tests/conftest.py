from __future__ import annotations

from pathlib import Path

import pytest

from app import create_app
from models.relation_record import RelationRecord
from models.syllabus_record import SyllabusRecord

SYLLABUS_CSV = """\
url,course_code,course_name,regulation_subject_name,campus,instructor,subject_group,subject_code,language,term
https://example.edu/A,A100,A,Reg A,Main,Ann,Core,S-A,English,Spring
https://example.edu/B,B100,B,Reg B,Main,Bob,Core,S-B,English,Fall

https://example.edu/C,C100,C,Reg C,North,Cy,Elective,S-C,Japanese,Spring
https://example.edu/Z,Z100,Lonely,Reg Z,North,Zed,Elective,S-Z,Japanese,Fall
"""

RELATION_CSV = """\
source,target,kind
A,B,related
B,C,recommended
D,E,exclusive
"""


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "syllabus.csv").write_text(SYLLABUS_CSV, encoding="utf-8")
    (tmp_path / "relation.csv").write_text(RELATION_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture()
def app(data_dir: Path):
    return create_app(
        TESTING=True,
        SECRET_KEY="test",
        SYLLABUS_SOURCE=str(data_dir / "syllabus.csv"),
        RELATION_SOURCE=str(data_dir / "relation.csv"),
    )


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def relations() -> list[RelationRecord]:
    return [
        RelationRecord("A", "B", "related"),
        RelationRecord("B", "C", "recommended"),
        RelationRecord("D", "E", "exclusive"),
    ]


@pytest.fixture()
def syllabus() -> list[SyllabusRecord]:
    return [
        SyllabusRecord(course_code="A100", course_name="A", instructor="Ann"),
        SyllabusRecord(course_code="B100", course_name="B", instructor="Bob"),
        SyllabusRecord(course_code="C100", course_name="C", instructor="Cy"),
    ]
