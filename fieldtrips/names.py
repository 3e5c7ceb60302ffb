"""
Name normalization and matching.

Roster files write names as "Jane Smith"; trip attendance sheets often use
"Smith, Jane '27" (last name first, class-year marker appended). This module
decides whether two such strings denote the same person.

Rules:
1. strip a trailing class-year marker ('27, '26, ...)
2. lowercase + trim, identical strings match
3. otherwise compare (first, last) decompositions case-insensitively
"""

from __future__ import annotations

import re
from typing import Any, Optional

from fieldtrips.model import ParsedName


# optional whitespace, apostrophe, two digits, optional whitespace, end of string
CLASS_YEAR_RE = re.compile(r"\s*'[0-9]{2}\s*$")


def strip_class_year(name: str) -> str:
    return CLASS_YEAR_RE.sub("", name).strip()


def normalize_name(name: str) -> str:
    """
    Canonical comparison form: class-year removed, trimmed, lowercased.
    """
    return strip_class_year(name).lower()


def parse_name(name: str) -> Optional[ParsedName]:
    """
    Split a name into first/last.

    - "Last, First" -> first comma part is the last name, second is the first name
    - "First Middle Last" -> first and last token, middle names are ignored

    Returns None if fewer than two components are found.
    """
    stripped = strip_class_year(name)

    if "," in stripped:
        # "Smith, Jane, Jr" -> last "Smith", first "Jane"; later parts are dropped
        parts = stripped.split(",")
        last, first = parts[0], parts[1]
        first = strip_class_year(first)
        last = strip_class_year(last)
        if not first or not last:
            return None
        return ParsedName(first=first, last=last)

    tokens = stripped.split()
    if len(tokens) < 2:
        return None
    return ParsedName(first=tokens[0], last=tokens[-1])


def names_match(name1: Any, name2: Any) -> bool:
    """
    True if both strings refer to the same person.

    Never raises: anything that is not a string simply does not match.
    """
    if not isinstance(name1, str) or not isinstance(name2, str):
        return False

    if normalize_name(name1) == normalize_name(name2):
        return True

    p1 = parse_name(name1)
    p2 = parse_name(name2)
    if p1 is None or p2 is None:
        return False

    return p1.first.lower() == p2.first.lower() and p1.last.lower() == p2.last.lower()
