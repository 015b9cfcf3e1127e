"""Tests for services.detail_lookup."""

from __future__ import annotations

import logging

from models.syllabus_record import SyllabusRecord
from services.detail_lookup import (
    SESSION_KEY,
    course_options,
    current_selection,
    lookup,
    select_course,
)


def test_lookup_hit(syllabus) -> None:
    assert lookup(syllabus, "B").instructor == "Bob"


def test_lookup_is_exact(syllabus) -> None:
    assert lookup(syllabus, "b") is None
    assert lookup(syllabus, " B") is None


def test_lookup_miss(syllabus) -> None:
    assert lookup(syllabus, "Z") is None
    assert lookup([], "A") is None


def test_course_options(syllabus) -> None:
    assert course_options(syllabus) == [
        {"code": "A100", "name": "A"},
        {"code": "B100", "name": "B"},
        {"code": "C100", "name": "C"},
    ]


def test_select_replaces_selection(syllabus) -> None:
    session: dict = {}
    select_course(session, syllabus, "A")
    select_course(session, syllabus, "C")
    assert session[SESSION_KEY] == lookup(syllabus, "C").to_dict()


def test_select_miss_keeps_previous(syllabus, caplog) -> None:
    session: dict = {}
    select_course(session, syllabus, "A")
    before = dict(session[SESSION_KEY])

    with caplog.at_level(logging.DEBUG, logger="syllabus_graph.lookup"):
        assert select_course(session, syllabus, "Z") is None

    assert current_selection(session) == before
    assert "No syllabus record named 'Z'" in caplog.text


def test_selection_has_all_ten_fields() -> None:
    session: dict = {}
    select_course(session, [SyllabusRecord(course_name="Q")], "Q")
    assert len(current_selection(session)) == 10


def test_no_selection() -> None:
    assert current_selection({}) is None
