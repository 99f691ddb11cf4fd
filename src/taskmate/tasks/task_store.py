# src/taskmate/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import CorruptDataError, StorageError
from .task_models import Task, decode_task

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Plain-text task store: one encoded task per line.

    Writes go to a temp file next to the target and are moved into place with
    os.replace, so a crash mid-write never leaves a half-written task file.
    """

    def __init__(self, path: str | Path = "tasks.txt", *, skip_corrupt: bool = True) -> None:
        self._path = Path(path)
        self._skip_corrupt = skip_corrupt
        logger.info("TaskFileStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self, *, skip_corrupt: bool | None = None) -> list[Task]:
        """
        Read every task from disk.

        - missing file -> []
        - corrupt line -> logged and skipped, or CorruptDataError when
          skip_corrupt is False
        - unreadable file -> StorageError
        """
        if skip_corrupt is None:
            skip_corrupt = self._skip_corrupt
        if not self._path.exists():
            return []

        try:
            # newline="": descriptions may hold "\r" or other Unicode line breaks.
            with self._path.open("r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except CorruptDataError:
                if not skip_corrupt:
                    raise
                logger.warning("Skipping corrupt line %d in %s: %r", lineno, self._path, line)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> bool:
        """Write all tasks; returns False (and logs) if the write failed."""
        tasks = list(tasks)
        payload = "".join(t.encode() + "\n" for t in tasks)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(payload, "utf-8", newline="")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            return False
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True
