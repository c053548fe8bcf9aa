"""tasklist — a small command-line TODO list manager.

Tasks live in a local JSON file and are managed through a strict
core / infra / cli layering.
"""

from tasklist.version import __version__

__all__: list[str] = ["__version__"]
