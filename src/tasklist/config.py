"""Settings loaded from environment variables.

One :class:`Settings` object per invocation.  Command-line flags are
applied on top by the CLI layer via :meth:`Settings.with_overrides`.

Environment
-----------
``TASKLIST_FILE``
    Path of the state file (default ``db.json`` in the working directory).
``TASKLIST_LOG_LEVEL``
    Standard ``logging`` level name (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

ENV_PREFIX = "TASKLIST"

DEFAULT_DATA_FILE = Path("db.json")
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(environ: Mapping[str, str], name: str, default: Path) -> Path:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_log_level(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    return level if level in _LOG_LEVELS else default


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for a single invocation."""

    data_file: Path = DEFAULT_DATA_FILE
    """Where task state is persisted."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Name of the minimum level emitted to stderr."""

    @property
    def log_level_value(self) -> int:
        """Numeric ``logging`` level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)

    def with_overrides(
        self,
        *,
        data_file: str | Path | None = None,
        verbose: bool = False,
    ) -> Settings:
        """Return a copy with command-line overrides applied."""
        settings = self
        if data_file is not None:
            settings = replace(settings, data_file=Path(data_file).expanduser())
        if verbose:
            settings = replace(settings, log_level="DEBUG")
        return settings


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    return Settings(
        data_file=_env_path(env, _k("FILE"), DEFAULT_DATA_FILE),
        log_level=_env_log_level(env, _k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
    )
