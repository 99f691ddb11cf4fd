# src/taskmate/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ..errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)

NO_SUCH_TASK_MESSAGE = "Hmm, no such task. Try again."


class TaskList:
    """
    Ordered, index-addressable task collection for one session.

    Indices are 0-based here; commands convert from the 1-based numbers shown
    to the user. Every index-based operation validates the index first.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def count(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        return list(self._tasks)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise TaskIndexError(NO_SUCH_TASK_MESSAGE)

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added index=%d type=%s", len(self._tasks) - 1, task.task_type.value)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def mark(self, index: int, is_done: bool) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        if is_done:
            task.mark_as_done()
        else:
            task.mark_as_not_done()
        logger.debug("Task marked index=%d done=%s", index, is_done)
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%d remaining=%d", index, len(self._tasks))
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions, in list order."""
        return [(i, t) for i, t in enumerate(self._tasks) if keyword in t.description]

    def sort(self, key: Callable[[Task], Any]) -> None:
        # list.sort is stable: equal keys keep their relative order.
        self._tasks.sort(key=key)
