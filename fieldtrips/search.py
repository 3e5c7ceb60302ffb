"""
Roster search.

Plain case-insensitive substring containment over student names, in roster
order. No ranking, no tokenizing.
"""

from __future__ import annotations

from typing import Iterable, Optional

from fieldtrips.model import Student


MIN_QUERY_LENGTH = 2


def search_students(roster: Iterable[Student], query: str) -> Optional[list[Student]]:
    """
    Return matching students, or None if the query is too short to search.

    None means "no suggestion list at all", which is different from an empty
    result list.
    """
    q = (query or "").strip()
    if len(q) < MIN_QUERY_LENGTH:
        return None

    q = q.lower()
    return [s for s in roster if q in s.name.lower()]


def select_by_name(roster: Iterable[Student], name: str) -> Optional[Student]:
    """
    Exact roster lookup. With duplicate names the first roster entry wins.
    """
    for s in roster:
        if s.name == name:
            return s
    return None
