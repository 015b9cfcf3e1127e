from __future__ import annotations

import io
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, TypeVar

import pandas as pd
import requests

from models.relation_record import RelationRecord
from models.syllabus_record import SyllabusRecord
from services.course_state import CourseGraphState

logger = logging.getLogger("syllabus_graph.loader")

T = TypeVar("T")


class LoadError(Exception):
    """A tabular source could not be fetched or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_text(source: str, timeout: float = 10.0) -> str:
    """Return the raw text of a path or http(s) URL.

    Raises LoadError on a missing file, a non-success HTTP status or a
    body that is not UTF-8.
    Single attempt, no retries.
    """
    if _is_url(source):
        try:
            resp = requests.get(source, timeout=timeout)
        except requests.RequestException as e:
            raise LoadError(source, str(e)) from e
        if not resp.ok:
            raise LoadError(source, f"HTTP {resp.status_code}")
        # requests guesses ISO-8859-1 for text/* without a charset; sources are UTF-8
        try:
            return resp.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise LoadError(source, str(e)) from e

    p = Path(source)
    try:
        return p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(source, str(e)) from e


def parse_rows(text: str, source: str = "<text>") -> list[dict[str, str]]:
    """Parse CSV text into one dict per data row, header row as keys."""
    if not text.strip():
        return []

    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            # trailing commas must not turn the first column into the index
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        raise LoadError(source, f"parse failed: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    return df.to_dict(orient="records")


def load_syllabus(source: str, timeout: float = 10.0) -> tuple[SyllabusRecord, ...]:
    rows = parse_rows(fetch_text(source, timeout), source)
    out: list[SyllabusRecord] = []
    for i, row in enumerate(rows, start=2):
        rec = SyllabusRecord.from_row(row)
        if not rec.course_name:
            logger.warning("Skipping %s line %d: no course_name", source, i)
            continue
        out.append(rec)
    return tuple(out)


def load_relations(source: str, timeout: float = 10.0) -> tuple[RelationRecord, ...]:
    rows = parse_rows(fetch_text(source, timeout), source)
    out: list[RelationRecord] = []
    for i, row in enumerate(rows, start=2):
        rec = RelationRecord.from_row(row)
        if not rec.source or not rec.target:
            logger.warning("Skipping %s line %d: missing endpoint", source, i)
            continue
        out.append(rec)
    return tuple(out)


def load_or_empty(
    loader: Callable[..., tuple[T, ...]],
    source: str,
    timeout: float = 10.0,
) -> tuple[T, ...]:
    # An unreadable source just means an empty graph
    try:
        return loader(source, timeout)
    except LoadError as e:
        logger.warning("Could not load %s (%s); using empty dataset", e.source, e.reason)
        return ()


def load_state(
    syllabus_source: str,
    relation_source: str,
    timeout: float = 10.0,
) -> CourseGraphState:
    """Load both datasets concurrently and wait for both before returning."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        syllabus_f = pool.submit(load_or_empty, load_syllabus, syllabus_source, timeout)
        relation_f = pool.submit(load_or_empty, load_relations, relation_source, timeout)
        state = CourseGraphState(
            syllabus=syllabus_f.result(),
            relations=relation_f.result(),
        )

    logger.info(
        "Loaded %d syllabus records and %d relations",
        len(state.syllabus),
        len(state.relations),
    )
    return state
