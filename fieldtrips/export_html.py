"""
HTML report export.

Writes one self-contained page per student that can be opened in any
browser, printed, or mailed to parents:
- student name + grade
- summary (completed / remaining / progress %)
- every field trip tagged attended / not attended
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import Optional

from fieldtrips.model import Progress
from fieldtrips.render import NOT_FOUND_HINT, NOT_FOUND_TITLE, status_label


_STYLE = """
body { font-family: sans-serif; max-width: 760px; margin: 2em auto; color: #222; }
.student-info h2 { margin-bottom: 0; }
.grade { color: #666; margin-top: 0.2em; }
.summary { display: flex; gap: 2em; margin: 1.5em 0; }
.summary-item { text-align: center; }
.summary-number { font-size: 2em; font-weight: bold; }
.summary-label { color: #666; }
.trip-item { display: flex; justify-content: space-between; padding: 0.6em 0; border-bottom: 1px solid #eee; }
.trip-date { color: #666; font-size: 0.9em; }
.status-complete { color: #1a7f37; }
.status-incomplete { color: #b42318; }
"""


def _esc(text: str) -> str:
    return html.escape(text, quote=True)


def _body(progress: Optional[Progress]) -> str:
    if progress is None:
        return (
            '<div class="empty-state">\n'
            f"  <h3>{_esc(NOT_FOUND_TITLE)}</h3>\n"
            f"  <p>{_esc(NOT_FOUND_HINT)}</p>\n"
            "</div>"
        )

    s = progress.student
    parts: list[str] = []
    parts.append('<div class="student-info">')
    parts.append(f"  <h2>{_esc(s.name)}</h2>")
    parts.append(f'  <p class="grade">Grade {_esc(s.grade)}</p>')
    parts.append("</div>")

    parts.append('<div class="summary">')
    for number, label in (
        (str(progress.completed_count), "Completed"),
        (str(progress.remaining), "Remaining"),
        (f"{progress.percent}%", "Progress"),
    ):
        parts.append('  <div class="summary-item">')
        parts.append(f'    <div class="summary-number">{number}</div>')
        parts.append(f'    <div class="summary-label">{label}</div>')
        parts.append("  </div>")
    parts.append("</div>")

    parts.append('<div class="progress-card">')
    parts.append("  <h3>Field Trips Progress</h3>")
    parts.append('  <div class="trip-list">')
    for t in progress.per_trip:
        css = "status-complete" if t.attended else "status-incomplete"
        parts.append('    <div class="trip-item">')
        parts.append('      <div class="trip-info">')
        parts.append(f'        <div class="trip-name">{_esc(t.name)}</div>')
        parts.append(f'        <div class="trip-date">{_esc(t.date)} • {_esc(t.teacher)}</div>')
        parts.append("      </div>")
        parts.append(f'      <span class="status-badge {css}">{_esc(status_label(t))}</span>')
        parts.append("    </div>")
    parts.append("  </div>")
    parts.append("</div>")

    return "\n".join(parts)


def render_progress_html(progress: Optional[Progress]) -> str:
    """
    Full HTML document for a progress view (or the not-found placeholder).
    """
    title = progress.student.name if progress is not None else NOT_FOUND_TITLE
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>Field Trips – {_esc(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{_body(progress)}\n"
        "</body>\n"
        "</html>\n"
    )


def export_progress_html(progress: Optional[Progress], out_path: str | Path) -> Path:
    """
    Write the report to `out_path` (parent folders are created). Returns the path.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_progress_html(progress), encoding="utf-8")
    return out
