"""
Terminal rendering of suggestions, progress, not-found and error views.

Two flavours:
- plain text lines (used by the CLI, which prints plain text only)
- rich renderables (used by the interactive mode)
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fieldtrips.model import Progress, Student, TripStatus


ATTENDED_LABEL = "✓ Attended"
NOT_ATTENDED_LABEL = "✗ Not Attended"

NOT_FOUND_TITLE = "Student not found"
NOT_FOUND_HINT = "Please try another search"

MAX_SUGGESTIONS = 20


def status_label(trip: TripStatus) -> str:
    return ATTENDED_LABEL if trip.attended else NOT_ATTENDED_LABEL


def student_label(student: Student) -> str:
    return f"{student.name} | Grade {student.grade}"


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------


def suggestion_lines(matches: Sequence[Student], limit: int = MAX_SUGGESTIONS) -> list[str]:
    lines = [f"{i}) {student_label(s)}" for i, s in enumerate(matches[:limit], start=1)]
    if len(matches) > limit:
        lines.append(f"... and {len(matches) - limit} more results")
    return lines


def progress_lines(progress: Optional[Progress]) -> list[str]:
    """
    Text rendering of the progress view, or the not-found placeholder.
    """
    if progress is None:
        return [NOT_FOUND_TITLE, NOT_FOUND_HINT]

    s = progress.student
    lines = [
        s.name,
        f"Grade {s.grade}",
        "",
        f"Completed: {progress.completed_count}",
        f"Remaining: {progress.remaining}",
        f"Progress:  {progress.percent}%",
        "",
        "Field Trips Progress:",
    ]
    for t in progress.per_trip:
        lines.append(f"- {t.name} | {t.date} • {t.teacher} | {status_label(t)}")
    return lines


def error_lines(message: str) -> list[str]:
    return ["Error", message]


# ---------------------------------------------------------------------------
# Rich
# ---------------------------------------------------------------------------


def suggestion_table(matches: Sequence[Student], limit: int = MAX_SUGGESTIONS) -> Table:
    table = Table(title=f"Students (max {limit})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Student")
    table.add_column("Grade", style="magenta")
    for i, s in enumerate(matches[:limit], start=1):
        table.add_row(str(i), f"[bold cyan]{escape(s.name)}[/]", escape(f"Grade {s.grade}"))
    if len(matches) > limit:
        table.caption = f"... and {len(matches) - limit} more results"
    return table


def progress_renderable(progress: Optional[Progress]) -> Panel:
    if progress is None:
        return Panel(Text(NOT_FOUND_HINT), title=NOT_FOUND_TITLE, box=box.ROUNDED)

    s = progress.student

    summary = Table.grid(padding=(0, 4))
    for _ in range(3):
        summary.add_column(justify="center")
    summary.add_row(
        f"[bold green]{progress.completed_count}[/]",
        f"[bold yellow]{progress.remaining}[/]",
        f"[bold cyan]{progress.percent}%[/]",
    )
    summary.add_row("Completed", "Remaining", "Progress")

    trips = Table(title="Field Trips Progress", box=box.SIMPLE)
    trips.add_column("Trip")
    trips.add_column("Date")
    trips.add_column("Teacher")
    trips.add_column("Status")
    for t in progress.per_trip:
        status = f"[green]{ATTENDED_LABEL}[/]" if t.attended else f"[red]{NOT_ATTENDED_LABEL}[/]"
        trips.add_row(escape(t.name), escape(t.date), escape(t.teacher), status)

    return Panel(
        Group(Text(f"Grade {s.grade}", style="magenta"), Text(""), summary, trips),
        title=f"[bold]{escape(s.name)}[/]",
        box=box.ROUNDED,
    )


def error_renderable(message: str) -> Panel:
    return Panel(Text(message), title="[bold red]Error[/]", box=box.ROUNDED)


def print_progress(console: Console, progress: Optional[Progress]) -> None:
    console.print(progress_renderable(progress))
