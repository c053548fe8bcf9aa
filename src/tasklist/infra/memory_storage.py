"""In-memory implementation of :class:`~tasklist.core.protocols.TaskStorage`.

Nothing touches the filesystem, which makes this backend the natural
choice for tests and for embedding the store in other programs.
"""

from __future__ import annotations

from collections.abc import Mapping


class InMemoryStorage:
    """Keep task state in a dict and count how often it was written."""

    def __init__(self, tasks: Mapping[str, bool] | None = None) -> None:
        self._tasks: dict[str, bool] = dict(tasks) if tasks else {}
        self.writes: int = 0

    def read(self) -> dict[str, bool]:
        return dict(self._tasks)

    def write(self, tasks: Mapping[str, bool]) -> None:
        self._tasks = dict(tasks)
        self.writes += 1
