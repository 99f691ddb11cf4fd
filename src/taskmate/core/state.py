# src/taskmate/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings (or any object with the same attributes, e.g. in tests).
    settings: object

    task_list: TaskList
    task_repo: TaskRepo | None = None

    # Commands mutate task_list in place; front ends that may call from more
    # than one thread go through this lock (see core.engine.execute).
    lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def app_name(self) -> str:
        return str(getattr(self.settings, "app_name", "Taskmate"))
