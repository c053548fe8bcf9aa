"""Presentation of task listings for the CLI layer.

:func:`format_listing` is a pure transform from a
:class:`~tasklist.core.models.TaskListing` to markup lines;
:func:`render_listing` sends those lines to stdout.
"""

from __future__ import annotations

from tasklist.cli.console import escape, out
from tasklist.core.models import TaskListing

PENDING_HEADING = "Pending:"
DONE_HEADING = "Done:"


def _section(heading: str, style: str, names: tuple[str, ...]) -> list[str]:
    lines = [f"[bold {style}]{heading}[/bold {style}]"]
    lines.extend(f"  {escape(name)}" for name in names)
    return lines


def format_listing(listing: TaskListing) -> list[str]:
    """Build the ``list`` output: pending section first, then done."""
    return [
        *_section(PENDING_HEADING, "yellow", listing.pending),
        *_section(DONE_HEADING, "green", listing.done),
    ]


def render_listing(listing: TaskListing) -> None:
    """Print *listing* to stdout, one task name per line."""
    for line in format_listing(listing):
        out.print(line)
