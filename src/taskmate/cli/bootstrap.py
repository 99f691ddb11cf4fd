# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- loads the saved task list and wires the file store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> bool:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.exception("Cannot create data directory %s", settings.data_dir)
        return False
    return True


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    dirs_ok = _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_path, skip_corrupt=getattr(settings, "skip_corrupt", True))

    tasks: list[Task] = []
    if not dirs_ok:
        # Nothing to load; saves will keep failing (and saying so) until the directory is fixed.
        logger.warning("Starting with an empty list; tasks will not be saved to %s", store.path)
        return AppState(settings=settings, task_list=TaskList(tasks), task_repo=store)

    try:
        tasks = store.load_all()
    except StorageError:
        # Start empty; the next save will report its own failure if the disk is still unusable.
        logger.exception("Failed to load tasks; starting with an empty list.")
        tasks = []

    return AppState(settings=settings, task_list=TaskList(tasks), task_repo=store)
