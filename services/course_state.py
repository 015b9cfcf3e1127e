from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from models.relation_record import RelationRecord
from models.syllabus_record import SyllabusRecord

EXTENSION_KEY = "course_graph"


@dataclass(frozen=True)
class CourseGraphState:
    """Both datasets, loaded once at startup and only read afterwards."""

    syllabus: tuple[SyllabusRecord, ...] = ()
    relations: tuple[RelationRecord, ...] = ()


def get_state() -> CourseGraphState:
    # create_app() always installs the state; an empty one means no data
    return current_app.extensions.get(EXTENSION_KEY) or CourseGraphState()
