# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Task


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    Records every save so tests can assert when the engine persisted, and can
    be switched to fail to exercise the degraded path.
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail_saves: bool = False) -> None:
        self.tasks: list[Task] = list(tasks or [])
        self.fail_saves = fail_saves
        self.saves: list[list[str]] = []

    def load_all(self) -> list[Task]:
        return list(self.tasks)

    def save_all(self, tasks: Iterable[Task]) -> bool:
        encoded = [t.encode() for t in tasks]
        if self.fail_saves:
            return False
        self.saves.append(encoded)
        return True


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    A SimpleNamespace rather than the real config keeps tests isolated from
    the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="Taskmate",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
        log_dir=tmp_path / "logs",
        skip_corrupt=True,
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: FakeTaskRepo) -> AppState:
    return AppState(settings=settings, task_list=TaskList(), task_repo=repo)
