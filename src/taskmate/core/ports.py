# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The engine only needs something that can load and save the whole task list;
the file store is one implementation, tests use an in-memory fake.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def load_all(self) -> list[Task]: ...

    def save_all(self, tasks: Iterable[Task]) -> bool: ...
