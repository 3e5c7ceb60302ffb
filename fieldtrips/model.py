"""
Central data model definitions used across the project.

This module defines the canonical structure of students, field trips and
progress results so that:
- all modules share the same field names
- loaded data stays read-only after loading (frozen dataclasses)
- the terminal UI, the HTML export and the tests see the same shapes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Student:
    """
    One roster entry. Grade is kept as the raw label from the roster file.
    """

    name: str
    grade: str


@dataclass(frozen=True)
class FieldTrip:
    """
    Represents one field trip as stored in field_trips_data.json.

    `students` holds the attendee names exactly as the trip source recorded
    them, which may be "Last, First '27" instead of the roster's "First Last".
    """

    key: str
    name: str
    date: str
    teacher: str
    students: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """
    Roster + trips, produced once by the loader.
    """

    students: Tuple[Student, ...]
    trips: Dict[str, FieldTrip] = field(default_factory=dict)

    @property
    def all_trips(self) -> List[FieldTrip]:
        return list(self.trips.values())


@dataclass(frozen=True)
class ParsedName:
    first: str
    last: str


@dataclass(frozen=True)
class TripStatus:
    name: str
    date: str
    teacher: str
    attended: bool


@dataclass(frozen=True)
class Progress:
    """
    Attendance summary for one student against every loaded trip.
    """

    student: Student
    completed_count: int
    total_count: int
    percent: int
    per_trip: List[TripStatus]

    @property
    def remaining(self) -> int:
        return self.total_count - self.completed_count

    @property
    def attended_trips(self) -> List[TripStatus]:
        return [t for t in self.per_trip if t.attended]
