from __future__ import annotations

import logging
from typing import Any, Iterable, MutableMapping

from models.syllabus_record import SyllabusRecord

logger = logging.getLogger("syllabus_graph.lookup")

SESSION_KEY = "selected_course"


def lookup(syllabus: Iterable[SyllabusRecord], name: str) -> SyllabusRecord | None:
    # exact match, first hit wins
    for rec in syllabus:
        if rec.course_name == name:
            return rec
    return None


def course_options(syllabus: Iterable[SyllabusRecord]) -> list[dict[str, str]]:
    """Dropdown entries: every course as code + name, valued by name."""
    return [{"code": rec.course_code, "name": rec.course_name} for rec in syllabus]


def select_course(
    session: MutableMapping[str, Any],
    syllabus: Iterable[SyllabusRecord],
    name: str,
) -> SyllabusRecord | None:
    """Replace the detail panel selection with ``name``.

    On a miss nothing changes: the panel keeps showing the previous course.
    """
    rec = lookup(syllabus, name)
    if rec is None:
        logger.debug("No syllabus record named %r; keeping current selection", name)
        return None

    session[SESSION_KEY] = rec.to_dict()
    return rec


def current_selection(session: MutableMapping[str, Any]) -> dict[str, str] | None:
    return session.get(SESSION_KEY)
