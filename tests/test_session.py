"""
Unit tests for the session state and the search-box state machine.

States: idle -> suggesting -> selected. Blur hides suggestions only after
the grace delay, measured with a fake clock here.
"""

import unittest

from fieldtrips.model import Catalog, FieldTrip, Student
from fieldtrips.session import IDLE, SELECTED, SUGGESTING, SearchBox, SessionState


def _catalog() -> Catalog:
    students = (Student("Jane Smith", "9"), Student("Janet Lee", "10"), Student("Ethan Brooks", "10"))
    trips = {
        "zoo": FieldTrip("zoo", "Zoo", "2025-09-18", "Ms. Chen", ("Smith, Jane '27",)),
        "museum": FieldTrip("museum", "Museum", "2025-10-01", "Mr. Patel", ("Brooks, Ethan '28",)),
    }
    return Catalog(students=students, trips=trips)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestSessionState(unittest.TestCase):
    def test_nothing_selected_initially(self) -> None:
        session = SessionState(_catalog())
        self.assertIsNone(session.current)
        self.assertIsNone(session.progress())

    def test_select_and_progress(self) -> None:
        session = SessionState(_catalog())
        student = session.select("Jane Smith")
        self.assertEqual(student, Student("Jane Smith", "9"))
        p = session.progress()
        self.assertEqual((p.completed_count, p.total_count, p.percent), (1, 2, 50))

    def test_unknown_name_keeps_previous_student(self) -> None:
        session = SessionState(_catalog())
        session.select("Jane Smith")
        self.assertIsNone(session.select("Nobody Here"))
        self.assertEqual(session.current, Student("Jane Smith", "9"))
        self.assertTrue(session.not_found)
        self.assertIsNone(session.progress())

        session.select("Ethan Brooks")
        self.assertFalse(session.not_found)
        self.assertEqual(session.progress().student.name, "Ethan Brooks")

    def test_unknown_name_with_nothing_selected(self) -> None:
        session = SessionState(_catalog())
        self.assertIsNone(session.select("Nobody Here"))
        self.assertIsNone(session.current)


class TestSearchBox(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.session = SessionState(_catalog())
        self.box = SearchBox(self.session, clock=self.clock, blur_delay=0.2)

    def test_starts_idle(self) -> None:
        self.assertEqual(self.box.state, IDLE)
        self.assertEqual(self.box.suggestions, [])

    def test_typing_two_chars_suggests(self) -> None:
        self.assertEqual(self.box.type_text("ja"), SUGGESTING)
        self.assertEqual([s.name for s in self.box.suggestions], ["Jane Smith", "Janet Lee"])

    def test_short_text_goes_idle(self) -> None:
        self.box.type_text("jan")
        self.assertEqual(self.box.type_text("j"), IDLE)
        self.assertEqual(self.box.suggestions, [])

    def test_zero_matches_stays_idle(self) -> None:
        self.assertEqual(self.box.type_text("zz"), IDLE)

    def test_activate_selects_and_collapses(self) -> None:
        self.box.type_text("lee")
        student = self.box.activate(0)
        self.assertEqual(student, Student("Janet Lee", "10"))
        self.assertEqual(self.box.state, SELECTED)
        self.assertEqual(self.box.text, "Janet Lee")
        self.assertEqual(self.box.suggestions, [])
        self.assertEqual(self.session.current, student)

    def test_activate_within_blur_grace_delay(self) -> None:
        self.box.type_text("jan")
        self.box.blur()
        self.clock.now += 0.1
        self.assertEqual(self.box.state, SUGGESTING)
        self.assertEqual(self.box.activate(1).name, "Janet Lee")
        self.assertEqual(self.box.state, SELECTED)

    def test_blur_hides_after_delay(self) -> None:
        self.box.type_text("jan")
        self.box.blur()
        self.clock.now += 0.25
        self.assertEqual(self.box.state, IDLE)
        self.assertIsNone(self.box.activate(0))

    def test_focus_with_text_resuggests(self) -> None:
        self.box.type_text("jan")
        self.box.blur()
        self.clock.now += 1
        self.assertEqual(self.box.focus(), SUGGESTING)
        self.assertEqual(len(self.box.suggestions), 2)

    def test_focus_cancels_pending_hide(self) -> None:
        self.box.type_text("jan")
        self.box.blur()
        self.box.focus()
        self.clock.now += 1
        self.assertEqual(self.box.state, SUGGESTING)

    def test_focus_with_short_text_stays_idle(self) -> None:
        self.box.type_text("j")
        self.assertEqual(self.box.focus(), IDLE)

    def test_activate_by_unknown_name(self) -> None:
        self.assertIsNone(self.box.activate("Nobody Here"))
        self.assertEqual(self.box.state, IDLE)
        self.assertTrue(self.session.not_found)


if __name__ == "__main__":
    unittest.main()
