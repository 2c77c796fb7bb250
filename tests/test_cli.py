# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

import pytest

from tuido import cli, tui
from tuido.models import Task
from tuido.storage import TaskStore


@pytest.fixture(autouse=True)
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "tasks.json"
    monkeypatch.setenv("TUIDO_FILE", str(path))
    monkeypatch.setenv("TUIDO_LOG_FILE", str(tmp_path / "tuido.log"))
    # keep the real root logger untouched
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return path


def test_starts_tui_with_loaded_tasks(monkeypatch: pytest.MonkeyPatch, env: Path) -> None:
    TaskStore(env).save([Task(1, "A", True)])
    seen = {}

    def fake_tui(store, tasks):
        seen["path"] = store.path
        seen["tasks"] = tasks

    monkeypatch.setattr(tui, "main", fake_tui)
    cli.main([])

    assert seen == {"path": env, "tasks": [Task(1, "A", True)]}


def test_missing_file_starts_empty(monkeypatch: pytest.MonkeyPatch, env: Path) -> None:
    seen = {}
    monkeypatch.setattr(tui, "main", lambda store, tasks: seen.setdefault("tasks", tasks))

    cli.main([])

    assert seen["tasks"] == []
    assert not env.exists()


def test_corrupt_file_exits_nonzero_before_tui(monkeypatch: pytest.MonkeyPatch, env: Path) -> None:
    env.write_text("not json at all", encoding="utf-8")

    def boom(store, tasks):
        raise AssertionError("TUI must not start")

    monkeypatch.setattr(tui, "main", boom)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert isinstance(excinfo.value.code, str)
    assert excinfo.value.code.startswith("Error loading tasks:")
    assert env.read_text(encoding="utf-8") == "not json at all"


def test_rejects_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--file", "x.json"])
    assert excinfo.value.code == 2


def test_unreadable_path_exits_with_message(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TUIDO_FILE", str(tmp_path / ("x" * 300) / "tasks.json"))
    monkeypatch.setattr(tui, "main", lambda store, tasks: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert str(excinfo.value.code).startswith("Error loading tasks: cannot read")
