# src/taskmate/core/commands.py

"""
Command actions.

A command is built by the parser with everything it needs and does its work
in run(), which returns the reply text or raises a TaskmateError. Commands
that change the task list set `mutates` so the engine persists afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from ..errors import FormatError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

SortKey = Callable[[Task], Any]


def _by_time(task: Task) -> tuple[bool, datetime]:
    when = task.time_key()
    # Untimed tasks go last; datetime.max only fills the tuple slot.
    return (when is None, when or datetime.max)


SORT_KEYS: dict[str, SortKey] = {
    "time": _by_time,
    "name": lambda t: t.description.casefold(),
    "status": lambda t: t.is_done,
}
DEFAULT_SORT_KEY = "time"


def _count_line(n: int) -> str:
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


def _numbered(items: Iterable[tuple[int, Task]]) -> list[str]:
    return [f"{i + 1}. {task}" for i, task in items]


def parse_task_number(args: str, verb: str) -> int:
    """Turn the 1-based number typed by the user into a 0-based index."""
    raw = args.strip()
    usage = f"Please provide a task number:\n  {verb} <task number>"
    if not raw:
        raise FormatError(usage)
    try:
        number = int(raw)
    except ValueError:
        raise FormatError(usage) from None
    return number - 1


class Command:
    mutates: ClassVar[bool] = False
    is_exit: ClassVar[bool] = False

    def run(self) -> str:
        raise NotImplementedError


@dataclass(slots=True)
class GreetCommand(Command):
    app_name: str = "Taskmate"

    def run(self) -> str:
        return f"Hello! I'm {self.app_name}.\nWhat can I do for you?"


@dataclass(slots=True)
class ExitCommand(Command):
    is_exit: ClassVar[bool] = True

    def run(self) -> str:
        return "Bye. Hope to see you again soon!"


@dataclass(slots=True)
class HelpCommand(Command):
    help_text: str

    def run(self) -> str:
        return self.help_text


@dataclass(slots=True)
class ListCommand(Command):
    tasks: TaskList

    def run(self) -> str:
        if not len(self.tasks):
            return "Your list is empty."
        lines = ["Here are the tasks in your list:"]
        lines.extend(_numbered(enumerate(self.tasks)))
        return "\n".join(lines)


@dataclass(slots=True)
class AddCommand(Command):
    mutates: ClassVar[bool] = True

    tasks: TaskList
    task: Task

    def run(self) -> str:
        self.tasks.add(self.task)
        return f"Got it. I've added this task:\n  {self.task}\n{_count_line(len(self.tasks))}"


@dataclass(slots=True)
class MarkCommand(Command):
    mutates: ClassVar[bool] = True

    tasks: TaskList
    args: str
    is_done: bool

    def run(self) -> str:
        verb = "mark" if self.is_done else "unmark"
        task = self.tasks.mark(parse_task_number(self.args, verb), self.is_done)
        if self.is_done:
            return f"Nice! I've marked this task as done:\n  {task}"
        return f"OK, I've marked this task as not done yet:\n  {task}"


@dataclass(slots=True)
class DeleteCommand(Command):
    mutates: ClassVar[bool] = True

    tasks: TaskList
    args: str

    def run(self) -> str:
        task = self.tasks.delete(parse_task_number(self.args, "delete"))
        return f"Noted. I've removed this task:\n  {task}\n{_count_line(len(self.tasks))}"


@dataclass(slots=True)
class FindCommand(Command):
    tasks: TaskList
    args: str

    def run(self) -> str:
        keyword = self.args.strip()
        if not keyword:
            raise FormatError("Please provide a keyword to search for:\n  find <keyword>")
        matches = self.tasks.find(keyword)
        if not matches:
            return "No matching tasks found."
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches)])


@dataclass(slots=True)
class SortCommand(Command):
    mutates: ClassVar[bool] = True

    tasks: TaskList
    args: str

    def run(self) -> str:
        name = self.args.strip().lower() or DEFAULT_SORT_KEY
        key = SORT_KEYS.get(name)
        if key is None:
            raise FormatError(f"Please sort by one of: {', '.join(SORT_KEYS)}\n  sort [key]")
        self.tasks.sort(key)
        logger.debug("Tasks sorted by %s", name)
        lines = [f"Your tasks are now sorted by {name}:"]
        lines.extend(_numbered(enumerate(self.tasks)))
        return "\n".join(lines)
