"""CLI application entry point and command routing for tasklist.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tasklist.exceptions.TasklistError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~tasklist.core.task_store.TaskStore`.
* ``print()`` is not used directly; output goes through the console
  proxies in :mod:`tasklist.cli.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from tasklist.cli import exit_codes
from tasklist.cli.console import console, escape
from tasklist.config import Settings, get_settings
from tasklist.core.protocols import TaskStorage
from tasklist.core.task_store import TaskStore
from tasklist.exceptions import (
    EmptyKeyError,
    StorageError,
    TasklistError,
    UnrecognizedCommandError,
)
from tasklist.logging_setup import setup_logging
from tasklist.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The command word is a free positional rather than an argparse
    sub-command so that unknown words reach :func:`main` and are
    reported as :class:`UnrecognizedCommandError`.
    """
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Keep a TODO list in a local file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "commands: " + ", ".join(COMMANDS) + "\n"
            "task names starting with a dash go after --:\n"
            "  tasklist add -- -urgent"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help="State file to use (default: $TASKLIST_FILE or ./db.json).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="One of: " + ", ".join(COMMANDS) + ".",
    )
    parser.add_argument(
        "key",
        nargs="?",
        default=None,
        help="Task name for add / mark-done / mark-undone (prefix with -- if it starts with '-').",
    )
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _require_key(key: str | None) -> str:
    if key is None or not key.strip():
        raise EmptyKeyError(hint="Usage: tasklist <command> <task name>")
    return key


def _saved() -> int:
    console.print("[bold green]Saved.[/bold green]")
    return exit_codes.SUCCESS


def _handle_add(store: TaskStore, key: str | None) -> int:
    store.add(_require_key(key))
    return _saved()


def _handle_mark_done(store: TaskStore, key: str | None) -> int:
    store.mark(_require_key(key), True)
    return _saved()


def _handle_mark_undone(store: TaskStore, key: str | None) -> int:
    store.mark(_require_key(key), False)
    return _saved()


def _handle_list(store: TaskStore, key: str | None) -> int:
    from tasklist.cli.render import render_listing

    if key is not None:
        logger.debug("Ignoring extra argument %r for 'list'", key)
    render_listing(store.list())
    return exit_codes.SUCCESS


def _handle_clear(store: TaskStore, key: str | None) -> int:
    if key is not None:
        logger.debug("Ignoring extra argument %r for 'clear'", key)
    store.clear()
    return _saved()


COMMANDS: dict[str, Callable[[TaskStore, str | None], int]] = {
    "add": _handle_add,
    "mark-done": _handle_mark_done,
    "mark-undone": _handle_mark_undone,
    "list": _handle_list,
    "clear": _handle_clear,
}


def _default_storage(settings: Settings) -> TaskStorage:
    from tasklist.infra.json_storage import JsonFileStorage

    return JsonFileStorage(settings.data_file)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    storage: TaskStorage | None = None,
) -> int:
    """Run the tasklist CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    storage:
        Storage backend to use instead of the JSON file named by the
        settings.  Tests pass an in-memory backend here.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    TasklistError
        For user errors and save failures; :func:`cli` renders them.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings().with_overrides(data_file=args.file, verbose=args.verbose)
    setup_logging(settings.log_level_value)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command: str = args.command
    handler = COMMANDS.get(command)
    if handler is None:
        raise UnrecognizedCommandError(
            command,
            hint="Expected one of: " + ", ".join(COMMANDS),
        )

    backend = storage if storage is not None else _default_storage(settings)
    logger.debug("Running %r with %r", command, backend)
    store = TaskStore.load(backend)
    return handler(store, args.key)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(exc: TasklistError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except StorageError as exc:
        _report(exc)
        sys.exit(exit_codes.STORAGE_ERROR)
    except TasklistError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
