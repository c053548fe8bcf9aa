"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and every
command keep working when Rich is not installed.

Two proxies are exported:

* :data:`console` — status and error messages, written to stderr.
* :data:`out` — command output (the task listing), written to stdout.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from tasklist.exceptions import EnvironmentError

# Style tags used by the CLI layer; stripped when rendering without Rich.
_STYLE_TAG = re.compile(r"(?<!\\)\[/?(?:bold|dim|italic|red|green|yellow|cyan|magenta)(?: [a-z]+)*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def escape(text: str) -> str:
    """Escape *text* so Rich renders it literally.

    User-supplied strings (task names) must pass through here before
    being embedded in markup.  Without Rich every ``[`` is escaped, and
    :func:`strip_markup` turns it back into a literal bracket.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text.replace("[", "\\[")
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Remove the CLI's unescaped style tags for plain-text output."""
    return _STYLE_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
            print(*plain, file=stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
