"""Custom exception hierarchy for tasklist.

All exceptions that cross layer boundaries must inherit from
:class:`TasklistError`.  Raw ``OSError`` / ``json`` failures must never
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
TasklistError
├── EmptyKeyError
├── KeyNotFoundError
├── UnrecognizedCommandError
├── CorruptStateError
├── StorageError
└── EnvironmentError
"""

from __future__ import annotations


class TasklistError(Exception):
    """Base exception for all tasklist errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class EmptyKeyError(TasklistError):
    """Raised when a command needs a task name and none was given."""

    def __init__(self, message: str = "Key cannot be empty!", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class KeyNotFoundError(TasklistError):
    """Raised when a task name is not present in the store."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid key: {name!r} is not in the list.", hint=hint)
        self.name: str = name


class UnrecognizedCommandError(TasklistError):
    """Raised when the command word is not one the CLI understands."""

    def __init__(self, word: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unrecognized command: {word!r}", hint=hint)
        self.word: str = word


# --- Persistence -----------------------------------------------------------

class CorruptStateError(TasklistError):
    """Raised when persisted state cannot be decoded into a task mapping."""


class StorageError(TasklistError):
    """Raised when task state cannot be written to storage."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TasklistError):
    """Raised when an optional runtime dependency is not available."""
