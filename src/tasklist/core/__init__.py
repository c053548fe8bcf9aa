"""Core layer — the task store, domain models and state codec.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; persistence goes through
  :class:`~tasklist.core.protocols.TaskStorage`.
* No imports from ``cli`` or ``infra``.
"""

from tasklist.core.codec import decode_state, encode_state
from tasklist.core.models import Task, TaskListing
from tasklist.core.protocols import TaskStorage
from tasklist.core.task_store import TaskStore

__all__: list[str] = [
    "Task",
    "TaskListing",
    "TaskStorage",
    "TaskStore",
    "decode_state",
    "encode_state",
]
