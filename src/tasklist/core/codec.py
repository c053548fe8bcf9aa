"""Encoding and decoding of persisted task state.

The on-disk document is a JSON object with a single ``"map"`` field::

    {
      "map": {
        "Buy milk": false,
        "Walk dog": true
      }
    }

Both functions are pure string transforms — the file handling lives in
:mod:`tasklist.infra.json_storage`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from tasklist.exceptions import CorruptStateError

MAP_FIELD: str = "map"
"""Name of the top-level field holding the name → done mapping."""


def encode_state(tasks: Mapping[str, bool]) -> str:
    """Serialize *tasks* to the human-readable state document."""
    document = {MAP_FIELD: {name: bool(done) for name, done in tasks.items()}}
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def decode_state(text: str) -> dict[str, bool]:
    """Parse a state document back into a name → done mapping.

    Raises
    ------
    CorruptStateError
        If *text* is not JSON, or does not have the expected shape.
    """
    try:
        document: Any = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # Oversized ints and deep nesting are not JSONDecodeError.
        raise CorruptStateError(f"State is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise CorruptStateError("State document must be a JSON object.")

    raw_map = document.get(MAP_FIELD)
    if not isinstance(raw_map, dict):
        raise CorruptStateError(f"State document has no {MAP_FIELD!r} object.")

    tasks: dict[str, bool] = {}
    for name, done in raw_map.items():
        if not name.strip():
            raise CorruptStateError("State contains a task with an empty name.")
        # 0 and 1 decode as int and are rejected.
        if not isinstance(done, bool):
            raise CorruptStateError(
                f"Task {name!r} has a non-boolean state: {done!r}",
            )
        tasks[name] = done
    return tasks
