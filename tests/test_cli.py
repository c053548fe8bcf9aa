"""Tests for CLI routing and the error boundary (cli/app.py).

Most tests inject :class:`InMemoryStorage` through ``main(storage=...)``;
the file-backed tests run inside ``tmp_path`` (see ``conftest.py``).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from tasklist import __version__
from tasklist.cli import exit_codes
from tasklist.cli.app import COMMANDS, cli, main
from tasklist.exceptions import (
    EmptyKeyError,
    KeyNotFoundError,
    StorageError,
    UnrecognizedCommandError,
)
from tasklist.infra.memory_storage import InMemoryStorage


# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------

class TestBootstrap:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: tasklist" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_help_lists_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["--help"])
        out = capsys.readouterr().out
        for command in COMMANDS:
            assert command in out


# ---------------------------------------------------------------------------
# Commands against in-memory storage
# ---------------------------------------------------------------------------

class TestCommands:
    def test_add(self, storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["add", "Buy milk"], storage=storage)
        assert code == exit_codes.SUCCESS
        assert storage.read() == {"Buy milk": False}
        assert "Saved." in capsys.readouterr().err

    def test_add_dash_prefixed_name_after_separator(self, storage: InMemoryStorage) -> None:
        assert main(["add", "--", "-urgent"], storage=storage) == exit_codes.SUCCESS
        assert storage.read() == {"-urgent": False}

    def test_help_explains_separator(self, capsys: pytest.CaptureFixture[str]) -> None:
        main([])
        assert "tasklist add -- -urgent" in capsys.readouterr().out

    def test_add_without_key(self, storage: InMemoryStorage) -> None:
        with pytest.raises(EmptyKeyError, match="Key cannot be empty!"):
            main(["add"], storage=storage)
        assert storage.writes == 0

    def test_add_blank_key(self, storage: InMemoryStorage) -> None:
        with pytest.raises(EmptyKeyError):
            main(["add", "  "], storage=storage)

    def test_mark_done(self) -> None:
        storage = InMemoryStorage({"Walk dog": False})
        assert main(["mark-done", "Walk dog"], storage=storage) == exit_codes.SUCCESS
        assert storage.read() == {"Walk dog": True}

    def test_mark_undone(self) -> None:
        storage = InMemoryStorage({"Walk dog": True})
        assert main(["mark-undone", "Walk dog"], storage=storage) == exit_codes.SUCCESS
        assert storage.read() == {"Walk dog": False}

    @pytest.mark.parametrize("command", ["mark-done", "mark-undone"])
    def test_mark_without_key(self, storage: InMemoryStorage, command: str) -> None:
        with pytest.raises(EmptyKeyError):
            main([command], storage=storage)

    def test_mark_unknown_task(self, storage: InMemoryStorage) -> None:
        with pytest.raises(KeyNotFoundError) as exc_info:
            main(["mark-done", "Nonexistent"], storage=storage)
        assert exc_info.value.name == "Nonexistent"
        assert storage.read() == {}
        assert storage.writes == 0

    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        storage = InMemoryStorage({"Buy milk": False, "Walk dog": True})
        assert main(["list"], storage=storage) == exit_codes.SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Pending:", "  Buy milk", "Done:", "  Walk dog"]
        assert storage.writes == 0

    def test_list_empty(self, storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["list"], storage=storage) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == ["Pending:", "Done:"]

    def test_clear(self) -> None:
        storage = InMemoryStorage({"a": True, "b": False})
        assert main(["clear"], storage=storage) == exit_codes.SUCCESS
        assert storage.read() == {}

    def test_unrecognized_command(self, storage: InMemoryStorage) -> None:
        with pytest.raises(UnrecognizedCommandError) as exc_info:
            main(["frobnicate"], storage=storage)
        assert exc_info.value.word == "frobnicate"
        assert "frobnicate" in str(exc_info.value)
        assert storage.writes == 0


# ---------------------------------------------------------------------------
# File-backed end to end
# ---------------------------------------------------------------------------

class TestFileBacked:
    def test_default_file_in_working_directory(self, tmp_path: Path) -> None:
        main(["add", "Buy milk"])
        document = json.loads((tmp_path / "db.json").read_text(encoding="utf-8"))
        assert document == {"map": {"Buy milk": False}}

    def test_file_flag(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "todo.json"
        main(["--file", str(target), "add", "a"])
        assert target.exists()
        assert not (tmp_path / "db.json").exists()

    def test_env_var_selects_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "from-env.json"
        monkeypatch.setenv("TASKLIST_FILE", str(target))
        main(["add", "a"])
        assert target.exists()

    def test_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["add", "Buy milk"])
        main(["add", "Walk dog"])
        main(["mark-done", "Walk dog"])
        capsys.readouterr()

        main(["list"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Pending:", "  Buy milk", "Done:", "  Walk dog"]

    def test_corrupt_file_starts_empty(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "db.json").write_text("not json", encoding="utf-8")
        assert main(["list"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == ["Pending:", "Done:"]


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def _run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["tasklist", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    code = exc_info.value.code
    assert isinstance(code, int)
    return code


class TestErrorBoundary:
    def test_success_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert _run_cli(monkeypatch, "add", "a") == exit_codes.SUCCESS

    def test_empty_key_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run_cli(monkeypatch, "add") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Key cannot be empty!" in err

    def test_unknown_task_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run_cli(monkeypatch, "mark-done", "[ghost]") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "[ghost]" in err
        assert "Hint:" in err

    def test_unrecognized_command_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run_cli(monkeypatch, "frobnicate") == exit_codes.GENERAL_ERROR
        assert "Unrecognized command" in capsys.readouterr().err

    def test_storage_error_has_distinct_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def _fail(self: object, tasks: object) -> None:
            raise StorageError("Could not save tasks", hint="check permissions")

        monkeypatch.setattr("tasklist.infra.json_storage.JsonFileStorage.write", _fail)
        assert _run_cli(monkeypatch, "add", "a") == exit_codes.STORAGE_ERROR
        err = capsys.readouterr().err
        assert "Could not save tasks" in err
        assert "check permissions" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _interrupt(*_args: object, **_kwargs: object) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr("tasklist.cli.app.main", _interrupt)
        assert _run_cli(monkeypatch, "list") == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def _boom(*_args: object, **_kwargs: object) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr("tasklist.cli.app.main", _boom)
        assert _run_cli(monkeypatch, "list") == exit_codes.UNEXPECTED_ERROR
        err = capsys.readouterr().err
        assert "Unexpected error" in err
        assert "RuntimeError: kaboom" in err
