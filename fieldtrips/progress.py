"""
Attendance progress.

Given one student and all trips, work out which trips the student attended
(via names_match against each trip's attendee list) and the summary numbers.
"""

from __future__ import annotations

import math
from typing import Iterable

from fieldtrips.model import FieldTrip, Progress, Student, TripStatus
from fieldtrips.names import names_match


def attended(student: Student, trip: FieldTrip) -> bool:
    # any() stops at the first matching attendee
    return any(names_match(student.name, attendee) for attendee in trip.students)


def _percent(completed: int, total: int) -> int:
    """
    Whole-number percentage, halves rounded up. No trips -> 0.
    """
    if total <= 0:
        return 0
    return int(math.floor(completed / total * 100 + 0.5))


def compute_progress(student: Student, trips: Iterable[FieldTrip] | dict[str, FieldTrip]) -> Progress:
    """
    Build the Progress summary for `student` across every trip (source order).
    """
    all_trips = list(trips.values()) if isinstance(trips, dict) else list(trips)

    per_trip: list[TripStatus] = []
    for trip in all_trips:
        per_trip.append(
            TripStatus(
                name=trip.name,
                date=trip.date,
                teacher=trip.teacher,
                attended=attended(student, trip),
            )
        )

    completed = sum(1 for t in per_trip if t.attended)
    total = len(all_trips)

    return Progress(
        student=student,
        completed_count=completed,
        total_count=total,
        percent=_percent(completed, total),
        per_trip=per_trip,
    )
