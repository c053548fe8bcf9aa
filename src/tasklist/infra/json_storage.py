"""JSON-file implementation of :class:`~tasklist.core.protocols.TaskStorage`.

This module is the **only** place in the codebase that reads or writes
the state file.  Load failures are absorbed (logged, then treated as
"no state"); write failures are mapped to
:class:`~tasklist.exceptions.StorageError`.

Rules
-----
* Writes are atomic: a temporary file in the target directory is
  written first and then moved over the destination with
  :func:`os.replace`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from tasklist.core.codec import decode_state, encode_state
from tasklist.exceptions import CorruptStateError, StorageError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Concrete :class:`TaskStorage` backed by a single JSON file.

    Usage::

        storage = JsonFileStorage(Path("db.json"))
        store = TaskStore.load(storage)

    This class satisfies the :class:`~tasklist.core.protocols.TaskStorage`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, path: str | Path) -> None:
        self.path: Path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def read(self) -> dict[str, bool]:
        """Return the persisted mapping.

        A missing file means a fresh list.  An unreadable or corrupt
        file is logged at WARNING and also treated as a fresh list; the
        next save overwrites it.
        """
        if not self.path.exists():
            logger.debug("No state file at %s; starting empty", self.path)
            return {}

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s (%s); starting empty", self.path, exc)
            return {}

        try:
            return decode_state(text)
        except CorruptStateError as exc:
            logger.warning("Ignoring corrupt state in %s: %s", self.path, exc)
            return {}

    def write(self, tasks: Mapping[str, bool]) -> None:
        """Atomically replace the state file with *tasks*.

        Raises
        ------
        StorageError
            If the directory cannot be created or the file cannot be
            written.
        """
        payload = encode_state(tasks)
        directory = self.path.parent
        temp_name: str | None = None

        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tf:
                temp_name = tf.name
                tf.write(payload)
            os.replace(temp_name, self.path)
        except OSError as exc:
            if temp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(temp_name)
            raise StorageError(
                f"Could not save tasks to {self.path}: {exc.strerror or exc}",
                hint="Check that the directory exists and is writable, "
                "or point --file somewhere else.",
            ) from exc

        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
