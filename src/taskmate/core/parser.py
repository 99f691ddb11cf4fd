# src/taskmate/core/parser.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from ..errors import EmptyTaskError, FormatError, UnrecognizedCommandError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, TaskType, Todo
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
    SortCommand,
)

# (task list, raw argument text) -> command
CommandFactory = Callable[[TaskList, str], Command]

logger = logging.getLogger(__name__)

UNRECOGNIZED_MESSAGE = "Please specify the type of task: todo, deadline, or event."

TASK_USAGE: dict[TaskType, str] = {
    TaskType.TODO: "todo <task>",
    TaskType.DEADLINE: "deadline <task> /by <time>",
    TaskType.EVENT: "event <task> /from <start time> /to <end time>",
}

BY_DELIMITER = " /by "
FROM_DELIMITER = " /from "
TO_DELIMITER = " /to "


class CommandRegistry:
    """
    Verb -> command factory table.

    Filled once at import time and then frozen; after that it is read-only.
    """

    def __init__(self) -> None:
        self._factories: dict[str, CommandFactory] = {}
        self._table: Mapping[str, CommandFactory] = self._factories
        self._help: dict[str, str] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        factory: CommandFactory,
        help_text: str,
    ) -> None:
        if self._frozen:
            raise RuntimeError(f"Command registry is frozen; cannot register {name!r}")
        key = name.lower()
        self._factories[key] = factory
        self._help[key] = help_text

    def freeze(self) -> None:
        self._table = MappingProxyType(dict(self._factories))
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, verb: str) -> CommandFactory | None:
        return self._table.get(verb.lower())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for task_type, usage in TASK_USAGE.items():
            lines.append(f"  {usage} - add a {task_type.value}")
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("Times use the yyyy-MM-dd HHmm format, e.g. 2024-12-25 2130.")
        return "\n".join(lines)


registry = CommandRegistry()

registry.register("bye", lambda tasks, args: ExitCommand(), help_text="Exit.")
registry.register("list", lambda tasks, args: ListCommand(tasks), help_text="Show all tasks.")
registry.register(
    "mark",
    lambda tasks, args: MarkCommand(tasks, args, True),
    help_text="Mark a task as done: mark <task number>.",
)
registry.register(
    "unmark",
    lambda tasks, args: MarkCommand(tasks, args, False),
    help_text="Mark a task as not done: unmark <task number>.",
)
registry.register(
    "delete",
    lambda tasks, args: DeleteCommand(tasks, args),
    help_text="Remove a task: delete <task number>.",
)
registry.register(
    "find",
    lambda tasks, args: FindCommand(tasks, args),
    help_text="Find tasks containing a keyword (case-sensitive): find <keyword>.",
)
registry.register(
    "sort",
    lambda tasks, args: SortCommand(tasks, args),
    help_text="Reorder tasks: sort [time | name | status] (default: time).",
)
registry.register(
    "help",
    lambda tasks, args: HelpCommand(registry.build_help()),
    help_text="Show this help.",
)
registry.freeze()


def split_verb(line: str) -> tuple[str, str]:
    """Return (lowercased verb, trimmed remainder) of an input line."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    verb = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""
    return verb, rest


def task_type_for(verb: str) -> TaskType | None:
    try:
        return TaskType(verb)
    except ValueError:
        return None


def parse_todo(body: str) -> Task:
    if not body:
        raise EmptyTaskError("The todo task cannot be empty!")
    return Todo(body)


def parse_deadline(body: str) -> Task:
    if not body:
        raise EmptyTaskError("The deadline task cannot be empty!")
    parts = body.split(BY_DELIMITER, 1)
    if len(parts) < 2:
        raise FormatError(
            f"Please provide a deadline in the format:\n  {TASK_USAGE[TaskType.DEADLINE]}"
        )
    description, by = parts
    return Deadline.from_text(description, by)


def parse_event(body: str) -> Task:
    if not body:
        raise EmptyTaskError("The event task cannot be empty!")
    parts = body.split(FROM_DELIMITER, 1)
    if len(parts) < 2:
        raise FormatError(f"Please provide an event in the format:\n  {TASK_USAGE[TaskType.EVENT]}")
    description, times = parts
    time_parts = times.split(TO_DELIMITER, 1)
    if len(time_parts) < 2:
        raise FormatError(
            f"Please provide an end time in the format:\n  {TASK_USAGE[TaskType.EVENT]}"
        )
    start, end = time_parts
    return Event.from_text(description, start, end)


_TASK_PARSERS: Mapping[TaskType, Callable[[str], Task]] = MappingProxyType(
    {
        TaskType.TODO: parse_todo,
        TaskType.DEADLINE: parse_deadline,
        TaskType.EVENT: parse_event,
    }
)


def parse_task(task_type: TaskType, body: str) -> Task:
    """Build a task from the text following its keyword."""
    return _TASK_PARSERS[task_type](body.strip())


def parse_command(line: str, tasks: TaskList) -> Command:
    """
    Map one input line to a command.

    Raises EmptyTaskError / FormatError / TimeFormatError / ValidationError for
    malformed task input and UnrecognizedCommandError for unknown verbs.
    """
    verb, rest = split_verb(line)

    factory = registry.get(verb)
    if factory is not None:
        return factory(tasks, rest)

    task_type = task_type_for(verb)
    if task_type is not None:
        return AddCommand(tasks, parse_task(task_type, rest))

    logger.debug("Unrecognized verb %r", verb)
    raise UnrecognizedCommandError(UNRECOGNIZED_MESSAGE)
