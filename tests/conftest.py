"""Shared pytest fixtures and configuration for the tasklist test suite.

Guidelines
----------
* Core tests use :class:`InMemoryStorage` — no filesystem access.
* File-backend and CLI tests write only under ``tmp_path``.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tasklist.core.task_store import TaskStore
from tasklist.infra.memory_storage import InMemoryStorage


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ``TASKLIST_*`` settings from leaking in, and run inside tmp_path."""
    monkeypatch.delenv("TASKLIST_FILE", raising=False)
    monkeypatch.delenv("TASKLIST_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def store(storage: InMemoryStorage) -> TaskStore:
    return TaskStore.load(storage)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Drop handlers installed by ``setup_logging`` during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
