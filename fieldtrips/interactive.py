from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from fieldtrips.export_html import export_progress_html
from fieldtrips.render import (
    error_renderable,
    print_progress,
    suggestion_table,
    MAX_SUGGESTIONS,
)
from fieldtrips.search import MIN_QUERY_LENGTH
from fieldtrips.session import SUGGESTING, SearchBox, SessionState


console = Console()


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def run_interactive(session: SessionState, box: Optional[SearchBox] = None) -> None:
    """
    Interactive menu loop: search a student, pick one, look at the progress.
    """
    box = box if box is not None else SearchBox(session)

    while True:
        _print_header(session)

        choice = _prompt(
            "\n[1] Search student\n"
            "[2] Show progress of current student\n"
            "[3] Export current student to .html\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            _flow_search(box)
        elif choice == "2":
            _flow_show_progress(session)
        elif choice == "3":
            _flow_export(session)
        else:
            _println("Invalid choice.")


def _print_header(session: SessionState) -> None:
    catalog = session.catalog
    _println("\n=== Field Trips (interactive) ===")
    _println(f"Data: students={len(catalog.students)} | trips={len(catalog.trips)}")
    current = escape(session.current.name) if session.current is not None else "(none)"
    _println(f"Current student: {current}")


def _flow_search(box: SearchBox) -> None:
    """
    Type part of a name, pick a suggestion by number. Blank input keeps the
    previous text (like re-focusing the search field).
    """
    while True:
        hint = f" [blank = '{box.text}']" if box.text else " [blank = back]"
        text = _prompt(f"Student name{escape(hint)}: ").strip()

        if text:
            box.type_text(text)
        elif box.text:
            box.focus()
        else:
            return

        if box.state != SUGGESTING:
            if len(box.text) < MIN_QUERY_LENGTH:
                _println(f"Please type at least {MIN_QUERY_LENGTH} characters.")
            else:
                _println("No results.")
            box.blur()
            if not text:
                return
            continue

        matches = box.suggestions
        console.print(suggestion_table(matches))

        pick = _prompt(escape("Enter number to select [blank = new search]: ")).strip()
        box.blur()
        if not pick:
            continue
        if not pick.isdigit():
            _println("Not a number.")
            continue

        i = int(pick)
        if not (1 <= i <= min(len(matches), MAX_SUGGESTIONS)):
            _println("Out of range.")
            continue

        student = box.activate(i - 1)
        print_progress(console, box.session.progress())
        if student is not None:
            return


def _flow_show_progress(session: SessionState) -> None:
    if session.current is None and not session.not_found:
        _println("No student selected. Use [1] to search.")
        return
    print_progress(console, session.progress())


def _safe_filename(name: str) -> str:
    # file name only: no path separators, no leading dots
    cleaned = re.sub(r"[\\/]+", "_", name).strip().lstrip(".")
    return cleaned or "student"


def _flow_export(session: SessionState) -> None:
    progress = session.progress()
    if progress is None:
        _println("No student selected.")
        return

    # Default to user's Downloads folder (works on Windows/macOS/Linux)
    downloads = Path.home() / "Downloads"
    default_name = _safe_filename(progress.student.name.lower().replace(" ", "_")) + ".html"

    out_in = _prompt(escape(f"Please enter desired file name, default is [{default_name}]: ")).strip()
    out_path = downloads / _safe_filename(out_in or default_name)

    if out_path.suffix.lower() != ".html":
        out_path = out_path.with_suffix(".html")

    try:
        out = export_progress_html(progress, out_path)
    except OSError as e:
        console.print(error_renderable(f"Could not write {out_path}: {e}"))
        return

    _println(f"\nSaved to: {out.resolve()}")
