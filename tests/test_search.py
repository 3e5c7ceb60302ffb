"""
Unit tests for roster search and selection by name.
"""

import unittest

from fieldtrips.model import Student
from fieldtrips.search import search_students, select_by_name


ROSTER = [
    Student("Jane Smith", "9"),
    Student("Marcus Oduya", "9"),
    Student("Janet Lee", "10"),
    Student("Benjamin Ng", "11"),
]


class TestSearch(unittest.TestCase):
    def test_short_query_hides_suggestions(self) -> None:
        self.assertIsNone(search_students(ROSTER, ""))
        self.assertIsNone(search_students(ROSTER, "a"))
        self.assertIsNone(search_students(ROSTER, " j "))

    def test_substring_in_roster_order(self) -> None:
        roster = [Student("Jane Smith", "9"), Student("Janet Lee", "10")]
        self.assertEqual(search_students(roster, "jan"), roster)

    def test_not_anchored(self) -> None:
        names = [s.name for s in search_students(ROSTER, "JAM")]
        self.assertEqual(names, ["Benjamin Ng"])

    def test_no_match_is_empty_list(self) -> None:
        self.assertEqual(search_students(ROSTER, "zz"), [])


class TestSelectByName(unittest.TestCase):
    def test_exact_name(self) -> None:
        self.assertEqual(select_by_name(ROSTER, "Janet Lee"), Student("Janet Lee", "10"))

    def test_unknown_name(self) -> None:
        self.assertIsNone(select_by_name(ROSTER, "janet lee"))

    def test_duplicate_name_first_wins(self) -> None:
        roster = [Student("Jane Smith", "9"), Student("Jane Smith", "11")]
        self.assertEqual(select_by_name(roster, "Jane Smith").grade, "9")


if __name__ == "__main__":
    unittest.main()
