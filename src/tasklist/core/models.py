"""Domain models for tasklist.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The mutable state lives in
:class:`~tasklist.core.task_store.TaskStore`; these are the snapshots
it hands out.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Single task
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Task:
    """A named unit of work with a binary completion state."""

    name: str
    """Task name.  Doubles as the unique key within a store."""

    done: bool
    """``True`` once the task is completed, ``False`` while pending."""


# ---------------------------------------------------------------------------
# Partitioned listing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TaskListing:
    """Result of :meth:`TaskStore.list` — task names split by state.

    Both tuples are materialized, so each can be iterated any number of
    times.  Together they cover every task exactly once.
    """

    pending: tuple[str, ...]
    done: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.pending) + len(self.done)

    def __bool__(self) -> bool:
        return len(self) > 0
