"""
Data loading (JSON -> Catalog).

Reads the two input documents:

    students_by_grade.json   {"9": ["Jane Smith", ...], "10": [...]}
    field_trips_data.json    {"zoo": {"name": ..., "date": ..., "teacher": ..., "students": [...]}}

Each source may be a local path or an http(s) URL. Both documents must load
for a Catalog to exist: a failure in either one raises LoadError and nothing
is applied.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from fieldtrips.model import Catalog, FieldTrip, Student


log = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent

ROSTER_FILENAME = "students_by_grade.json"
TRIPS_FILENAME = "field_trips_data.json"

TRIP_FIELDS = ("name", "date", "teacher", "students")

LOAD_ERROR_MESSAGE = "Failed to load data. Make sure the JSON files are available."


class LoadError(RuntimeError):
    """Raised when either input document cannot be fetched or parsed."""


def _data_dir() -> Path:
    """
    Return the directory that contains the bundled JSON datasets.
    """
    return PACKAGE_DIR / "data"


def default_roster_source() -> Path:
    return _data_dir() / ROSTER_FILENAME


def default_trips_source() -> Path:
    return _data_dir() / TRIPS_FILENAME


def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _fetch_json(source: str | Path, timeout: float = 30) -> Any:
    """
    Load one JSON document from a file path or URL.
    """
    if _is_url(source):
        resp = requests.get(str(source), timeout=timeout)
        resp.raise_for_status()
        return resp.json()

    return json.loads(Path(source).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Reshaping
# ---------------------------------------------------------------------------


def flatten_roster(students_by_grade: dict[str, Any]) -> list[Student]:
    """
    Flatten {grade: [names]} into one ordered roster.

    Every (grade, name) pair is kept, duplicates included.
    """
    if not isinstance(students_by_grade, dict):
        raise ValueError("roster must be a JSON object mapping grade -> names")

    roster: list[Student] = []
    for grade, names in students_by_grade.items():
        if not isinstance(names, list):
            raise ValueError(f"roster entry for grade {grade!r} is not a list")
        for name in names:
            roster.append(Student(name=str(name), grade=str(grade)))
    return roster


def parse_trips(trips_raw: dict[str, Any]) -> dict[str, FieldTrip]:
    """
    Convert the raw trip mapping into FieldTrip records, keeping source order.

    Every trip must carry name, date, teacher and a students list; a trip
    missing any of them makes the whole document invalid (ValueError).
    """
    if not isinstance(trips_raw, dict):
        raise ValueError("field trips must be a JSON object mapping key -> trip")

    trips: dict[str, FieldTrip] = {}
    for key, t in trips_raw.items():
        if not isinstance(t, dict):
            raise ValueError(f"trip {key!r} is not an object")
        missing = [f for f in TRIP_FIELDS if t.get(f) is None]
        if missing:
            raise ValueError(f"trip {key!r} is missing {', '.join(missing)}")
        students = t["students"]
        if not isinstance(students, list):
            raise ValueError(f"trip {key!r} has no students list")
        trips[str(key)] = FieldTrip(
            key=str(key),
            name=str(t["name"]),
            date=str(t["date"]),
            teacher=str(t["teacher"]),
            students=tuple(str(s) for s in students),
        )
    return trips


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_catalog(
    roster_source: str | Path | None = None,
    trips_source: str | Path | None = None,
) -> Catalog:
    """
    Load roster + trips and return an immutable Catalog.

    Raises LoadError if either document fails to fetch, decode or reshape.
    """
    roster_source = roster_source if roster_source is not None else default_roster_source()
    trips_source = trips_source if trips_source is not None else default_trips_source()

    try:
        roster_raw = _fetch_json(roster_source)
        trips_raw = _fetch_json(trips_source)
        students = flatten_roster(roster_raw)
        trips = parse_trips(trips_raw)
    except (OSError, ValueError, requests.RequestException) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        log.debug("Error loading data: %s", e)
        raise LoadError(LOAD_ERROR_MESSAGE) from e

    log.debug("Loaded %d students and %d trips", len(students), len(trips))
    return Catalog(students=tuple(students), trips=trips)
