"""Core task store — the in-memory task mapping and its operations.

The store owns the name → done mapping and enforces its invariants.
Persistence is delegated to a :class:`~tasklist.core.protocols.TaskStorage`
injected at construction time.

Guarantees
----------
* Every key is a distinct, non-blank string.
* Every mutation (``add``, ``mark``, ``clear``) is written through to
  storage before the method returns.  There is no batching.
* Failed operations leave both the mapping and storage untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tasklist.core.models import Task, TaskListing
from tasklist.core.protocols import TaskStorage
from tasklist.exceptions import EmptyKeyError, KeyNotFoundError

logger = logging.getLogger(__name__)


class TaskStore:
    """Mapping of task name to completion state.

    Parameters
    ----------
    storage:
        Any object satisfying the :class:`TaskStorage` protocol.
    tasks:
        Initial mapping.  Copied; the caller's mapping is never mutated.
    """

    def __init__(
        self,
        storage: TaskStorage,
        tasks: Mapping[str, bool] | None = None,
    ) -> None:
        self._storage: TaskStorage = storage
        self._tasks: dict[str, bool] = dict(tasks) if tasks else {}

    @classmethod
    def load(cls, storage: TaskStorage) -> TaskStore:
        """Build a store from whatever *storage* currently holds.

        Missing or undecodable state yields an empty store; the storage
        backend is responsible for absorbing those conditions.
        """
        tasks = storage.read()
        logger.debug("Loaded %d task(s)", len(tasks))
        return cls(storage, tasks)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def get(self, name: str) -> Task | None:
        """Return the task called *name*, or ``None``."""
        if name not in self._tasks:
            return None
        return Task(name=name, done=self._tasks[name])

    def tasks(self) -> list[Task]:
        """Return a snapshot of every task in insertion order."""
        return [Task(name=name, done=done) for name, done in self._tasks.items()]

    def as_dict(self) -> dict[str, bool]:
        """Return a copy of the underlying mapping."""
        return dict(self._tasks)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, name: str) -> None:
        """Insert *name* as a pending task unless it already exists.

        An existing task keeps its current state.  State is persisted
        either way.

        Raises
        ------
        EmptyKeyError
            If *name* is empty or whitespace-only.
        StorageError
            If the state cannot be written.
        """
        if not name or not name.strip():
            raise EmptyKeyError()
        if name not in self._tasks:
            self._tasks[name] = False
            logger.debug("Added task %r", name)
        else:
            logger.debug("Task %r already present; state kept", name)
        self._save()

    def mark(self, name: str, done: bool) -> None:
        """Set the completion state of an existing task to *done*.

        Raises
        ------
        KeyNotFoundError
            If no task is called *name*.  Nothing is written.
        StorageError
            If the state cannot be written.
        """
        if name not in self._tasks:
            raise KeyNotFoundError(
                name,
                hint="Run 'tasklist list' to see the existing tasks.",
            )
        self._tasks[name] = done
        logger.debug("Marked task %r done=%s", name, done)
        self._save()

    def list(self) -> TaskListing:
        """Partition task names into pending and done."""
        pending = tuple(name for name, done in self._tasks.items() if not done)
        finished = tuple(name for name, done in self._tasks.items() if done)
        return TaskListing(pending=pending, done=finished)

    def clear(self) -> None:
        """Remove every task and persist the empty state."""
        count = len(self._tasks)
        self._tasks.clear()
        logger.debug("Cleared %d task(s)", count)
        self._save()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save(self) -> None:
        self._storage.write(dict(self._tasks))
