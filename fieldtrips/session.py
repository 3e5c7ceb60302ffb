"""
Session state and the search-box controller.

SessionState holds the loaded Catalog plus the only mutable piece of the
application: the currently selected student.

SearchBox models the search field + suggestion dropdown as a small state
machine:

    idle        no suggestions shown
    suggesting  dropdown visible with search results
    selected    a student was picked, progress can be rendered

Losing focus hides the dropdown only after a short grace delay so that a
click on a suggestion (which blurs the field first) can still land. The
delay is resolved against an injectable clock instead of a timer thread.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from fieldtrips.model import Catalog, Progress, Student
from fieldtrips.progress import compute_progress
from fieldtrips.search import MIN_QUERY_LENGTH, search_students, select_by_name


IDLE = "idle"
SUGGESTING = "suggesting"
SELECTED = "selected"

BLUR_HIDE_DELAY = 0.2  # seconds


class SessionState:
    """
    Current selection on top of an immutable Catalog.

    A failed selection keeps the previous student and sets `not_found`,
    so the view shows the "not found" placeholder.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.current: Optional[Student] = None
        self.not_found = False

    def search(self, query: str) -> Optional[list[Student]]:
        return search_students(self.catalog.students, query)

    def select(self, name: str) -> Optional[Student]:
        student = select_by_name(self.catalog.students, name)
        if student is None:
            self.not_found = True
            return None
        self.current = student
        self.not_found = False
        return student

    def progress(self) -> Optional[Progress]:
        """
        Progress for the current student, or None for the not-found view.
        """
        if self.not_found or self.current is None:
            return None
        return compute_progress(self.current, self.catalog.trips)


class SearchBox:
    def __init__(
        self,
        session: SessionState,
        clock: Callable[[], float] = time.monotonic,
        blur_delay: float = BLUR_HIDE_DELAY,
    ) -> None:
        self.session = session
        self.text = ""
        self._clock = clock
        self._blur_delay = blur_delay
        self._state = IDLE
        self._suggestions: list[Student] = []
        self._hide_at: Optional[float] = None

    # -- observable state ---------------------------------------------------

    def _resolve_pending_hide(self) -> None:
        if self._hide_at is not None and self._clock() >= self._hide_at:
            self._hide_at = None
            if self._state == SUGGESTING:
                self._state = IDLE
                self._suggestions = []

    @property
    def state(self) -> str:
        self._resolve_pending_hide()
        return self._state

    @property
    def suggestions(self) -> list[Student]:
        self._resolve_pending_hide()
        return list(self._suggestions) if self._state == SUGGESTING else []

    # -- events ---------------------------------------------------------------

    def _show_suggestions(self, query: str) -> None:
        matches = self.session.search(query)
        if not matches:
            # too short or zero matches: dropdown stays hidden
            self._state = IDLE
            self._suggestions = []
            return
        self._state = SUGGESTING
        self._suggestions = matches

    def type_text(self, text: str) -> str:
        """
        User changed the field contents.
        """
        self.text = text
        self._hide_at = None
        self._show_suggestions(text)
        return self._state

    def focus(self) -> str:
        self._hide_at = None
        if len(self.text) >= MIN_QUERY_LENGTH:
            self._show_suggestions(self.text)
        return self._state

    def blur(self) -> None:
        self._hide_at = self._clock() + self._blur_delay

    def activate(self, choice: int | str) -> Optional[Student]:
        """
        Pick a suggestion by 0-based index or by roster name.

        Returns the selected student, or None if nothing matched. Works while
        a blur-hide is still pending.
        """
        self._resolve_pending_hide()

        if isinstance(choice, int):
            if self._state != SUGGESTING or not (0 <= choice < len(self._suggestions)):
                return None
            name = self._suggestions[choice].name
        else:
            name = choice

        student = self.session.select(name)
        self._hide_at = None
        self._suggestions = []
        if student is None:
            self._state = IDLE
            return None

        self.text = student.name
        self._state = SELECTED
        return student
