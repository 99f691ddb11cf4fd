# tests/test_bootstrap.py

from __future__ import annotations

import logging

import pytest

from taskmate.cli.bootstrap import create_initial_state
from taskmate.core.engine import respond
from taskmate.logging_setup import setup_logging
from taskmate.tasks.task_store import TaskFileStore


def test_create_initial_state_loads_saved_tasks(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text("T | 1 | read book\nnot a task\n", "utf-8")

    state = create_initial_state(settings=settings)

    assert isinstance(state.task_repo, TaskFileStore)
    assert [str(t) for t in state.task_list] == ["[T][X] read book"]


def test_changes_are_written_through(settings) -> None:
    state = create_initial_state(settings=settings)
    respond(state, "todo walk the dog")
    respond(state, "mark 1")

    reloaded = create_initial_state(settings=settings)
    assert [str(t) for t in reloaded.task_list] == ["[T][X] walk the dog"]


def test_unreadable_task_file_starts_empty(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_bytes(b"\xff\xfe\x00")

    state = create_initial_state(settings=settings)
    assert state.task_list.count() == 0


def test_setup_logging_writes_file(settings, restore_logging) -> None:
    log_file = setup_logging(log_dir=settings.log_dir)
    logging.getLogger("taskmate.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == settings.log_dir / "taskmate.log"
    assert "hello file" in log_file.read_text("utf-8")


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_main_runs_console_until_bye(settings, monkeypatch, capsys, restore_logging) -> None:
    from taskmate.cli import main as cli_main

    lines = iter(["todo from main", "bye"])
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    cli_main.main()

    assert "Bye. Hope to see you again soon!" in capsys.readouterr().out
    assert settings.tasks_path.read_text("utf-8") == "T | 0 | from main\n"


def test_main_refuses_corrupt_file_in_strict_mode(settings, monkeypatch, restore_logging) -> None:
    from taskmate.cli import main as cli_main

    settings.skip_corrupt = False
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text("garbage\n", "utf-8")
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)

    with pytest.raises(SystemExit):
        cli_main.main()


def test_unusable_data_dir_starts_empty_and_reports_failed_saves(settings, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")
    settings.data_dir = blocker / "data"
    settings.tasks_path = settings.data_dir / "tasks.txt"

    state = create_initial_state(settings=settings)
    assert state.task_list.count() == 0

    reply = respond(state, "todo still works")
    assert reply.ok
    assert "Could not save your tasks to disk" in reply.text
    assert state.task_list.count() == 1


def test_setup_logging_falls_back_to_console(tmp_path, restore_logging) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")

    setup_logging(log_dir=blocker / "logs")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("taskmate.tasks.task_store", logging.DEBUG, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("urllib3", logging.WARNING, False),
    ],
)
def test_console_noise_filter(name: str, level: int, shown: bool) -> None:
    from taskmate.logging_setup import _ConsoleNoiseFilter

    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is shown
