"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can swap the file backend for an in-memory
one without touching real storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class TaskStorage(Protocol):
    """Contract for task-state persistence backends.

    Any object that implements :meth:`read` and :meth:`write` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read(self) -> dict[str, bool]:
        """Return the persisted name → done mapping.

        Implementations return an empty dict when no state exists yet
        or when the existing state cannot be decoded.  They must not
        raise for those conditions.
        """
        ...  # pragma: no cover

    def write(self, tasks: Mapping[str, bool]) -> None:
        """Persist *tasks*, replacing any prior state.

        Raises
        ------
        StorageError
            When the state cannot be written.
        """
        ...  # pragma: no cover
