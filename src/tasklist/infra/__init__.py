"""Infrastructure layer — storage backends.

Every raw ``OSError`` raised while touching the filesystem is caught
here and re-raised as a :class:`~tasklist.exceptions.TasklistError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from tasklist.infra.json_storage import JsonFileStorage
from tasklist.infra.memory_storage import InMemoryStorage

__all__: list[str] = [
    "InMemoryStorage",
    "JsonFileStorage",
]
