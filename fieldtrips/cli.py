"""
CLI (Command Line Interface).

Quick terminal commands, e.g.:

    fieldtrips search <text>
    fieldtrips progress "<student name>"
    fieldtrips export "<student name>" <file.html>
    fieldtrips interactive

Data files default to the bundled JSON in fieldtrips/data/ and can be
overridden with --roster / --trips (path or http(s) URL).

Note:
- The interactive UI lives in fieldtrips/interactive.py
- This CLI prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging

from fieldtrips.export_html import export_progress_html
from fieldtrips.loader import LoadError, load_catalog
from fieldtrips.model import Catalog
from fieldtrips.render import error_lines, progress_lines, suggestion_lines
from fieldtrips.session import SessionState


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def _cmd_search(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    List roster students whose name contains the search text.
    """
    query = (args.text or "").strip()
    if not query:
        print("Please provide a search text.")
        return 1

    matches = SessionState(catalog).search(query)
    if matches is None:
        print("Please type at least 2 characters.")
        return 1
    if not matches:
        print("No results.")
        return 0

    _print_lines(suggestion_lines(matches))
    return 0


def _cmd_progress(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    Show the field trip progress of one student (exact roster name).
    """
    name = (args.name or "").strip()
    if not name:
        print("Please provide a student name.")
        return 1

    session = SessionState(catalog)
    session.select(name)
    progress = session.progress()
    _print_lines(progress_lines(progress))
    return 0 if progress is not None else 1


def _cmd_export(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    Write the progress of one student into an HTML report.
    """
    name = (args.name or "").strip()
    out_path = (args.out or "").strip()
    if not name:
        print("Please provide a student name.")
        return 1
    if not out_path:
        print("Please provide output .html path.")
        return 1

    session = SessionState(catalog)
    if session.select(name) is None:
        _print_lines(progress_lines(None))
        return 1

    out = export_progress_html(session.progress(), out_path)
    print(f"Exported progress of {name} to: {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="fieldtrips", description="Field trip attendance tracker")
    parser.add_argument("--roster", type=str, default=None, help="students_by_grade.json (path or URL)")
    parser.add_argument("--trips", type=str, default=None, help="field_trips_data.json (path or URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Search for students")
    p_search.add_argument("text", type=str, help="Part of the student's name")

    p_progress = sub.add_parser("progress", help="Show field trip progress of a student")
    p_progress.add_argument("name", type=str, help="Student name as listed in the roster")

    p_export = sub.add_parser("export", help="Export a student's progress to .html")
    p_export.add_argument("name", type=str, help="Student name as listed in the roster")
    p_export.add_argument("out", type=str, help="Output file path (e.g. jane.html)")

    sub.add_parser("interactive", help="Interactive search mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads data, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.roster, args.trips)
    except LoadError as e:
        _print_lines(error_lines(str(e)))
        raise SystemExit(1)

    if args.command == "search":
        raise SystemExit(_cmd_search(args, catalog))
    if args.command == "progress":
        raise SystemExit(_cmd_progress(args, catalog))
    if args.command == "export":
        raise SystemExit(_cmd_export(args, catalog))

    if args.command == "interactive":
        from fieldtrips.interactive import run_interactive

        run_interactive(SessionState(catalog))
        raise SystemExit(0)

    raise SystemExit(2)
