# src/taskmate/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..errors import CorruptDataError, TimeFormatError, ValidationError

TIME_FORMAT = "%Y-%m-%d %H%M"
TIME_FORMAT_MESSAGE = "Please use yyyy-MM-dd HHmm format for time.\n  eg. 2024-12-25 2130"

FIELD_SEPARATOR = " | "

# strptime accepts single-digit and non-ASCII digits; the input format does not.
_TIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}", re.ASCII)


class TaskType(StrEnum):
    """
    Task variant. The value is the command keyword; `icon` is the one-letter
    tag used both on screen and in the task file.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def icon(self) -> str:
        return self.value[0].upper()

    @classmethod
    def from_icon(cls, raw: str) -> TaskType:
        for member in cls:
            if member.icon == raw:
                return member
        raise CorruptDataError(f"Unknown task type tag: {raw!r}")


def parse_time(text: str) -> datetime:
    """Parse `yyyy-MM-dd HHmm`; anything else raises TimeFormatError."""
    raw = text.strip()
    if not _TIME_RE.fullmatch(raw):
        raise TimeFormatError(TIME_FORMAT_MESSAGE)
    try:
        return datetime.strptime(raw, TIME_FORMAT)
    except ValueError:
        raise TimeFormatError(TIME_FORMAT_MESSAGE) from None


def format_time(value: datetime) -> str:
    """Display form, e.g. `Dec 25 2024, 9:30PM`."""
    hour = value.hour % 12 or 12
    return f"{value:%b %d %Y}, {hour}:{value:%M}{'AM' if value.hour < 12 else 'PM'}"


def encode_time(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)


@dataclass(slots=True)
class Task:
    task_type: ClassVar[TaskType]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        description = (self.description or "").strip()
        if not description:
            raise ValidationError("The task description cannot be empty!")
        # The task file holds one task per "\n"-terminated line.
        if "\n" in description:
            raise ValidationError("The task description must fit on one line.")
        self.description = description

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    @property
    def type_icon(self) -> str:
        return self.task_type.icon

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def time_key(self) -> datetime | None:
        """Time used when sorting chronologically (None for untimed tasks)."""
        return None

    def _details(self) -> str:
        return ""

    def _time_fields(self) -> list[str]:
        return []

    def encode(self) -> str:
        fields = [self.type_icon, "1" if self.is_done else "0", self.description]
        fields.extend(self._time_fields())
        return FIELD_SEPARATOR.join(fields)

    def __str__(self) -> str:
        return f"[{self.type_icon}][{self.status_icon}] {self.description}{self._details()}"


@dataclass(slots=True)
class Todo(Task):
    task_type: ClassVar[TaskType] = TaskType.TODO


@dataclass(slots=True)
class Deadline(Task):
    task_type: ClassVar[TaskType] = TaskType.DEADLINE

    by: datetime

    @classmethod
    def from_text(cls, description: str, by: str, *, is_done: bool = False) -> Deadline:
        return cls(description, parse_time(by), is_done=is_done)

    def time_key(self) -> datetime | None:
        return self.by

    def _details(self) -> str:
        return f" (by: {format_time(self.by)})"

    def _time_fields(self) -> list[str]:
        return [encode_time(self.by)]


@dataclass(slots=True)
class Event(Task):
    task_type: ClassVar[TaskType] = TaskType.EVENT

    start: datetime
    end: datetime

    @classmethod
    def from_text(cls, description: str, start: str, end: str, *, is_done: bool = False) -> Event:
        return cls(description, parse_time(start), parse_time(end), is_done=is_done)

    def time_key(self) -> datetime | None:
        return self.start

    def _details(self) -> str:
        return f" (from: {format_time(self.start)} to: {format_time(self.end)})"

    def _time_fields(self) -> list[str]:
        return [encode_time(self.start), encode_time(self.end)]


# Number of trailing time fields per variant in the encoded form.
_TIME_FIELD_COUNT: dict[TaskType, int] = {
    TaskType.TODO: 0,
    TaskType.DEADLINE: 1,
    TaskType.EVENT: 2,
}


def decode_task(line: str) -> Task:
    """
    Rebuild a Task from its `encode()` form.

    Time fields are peeled off the end of the line, so descriptions that
    contain the separator still decode correctly.
    """
    raw = line.rstrip("\r\n")
    head = raw.split(FIELD_SEPARATOR, 2)
    if len(head) < 3:
        raise CorruptDataError(f"Expected at least 3 fields, got {len(head)}: {line!r}")

    task_type = TaskType.from_icon(head[0].strip())
    done_flag = head[1].strip()
    if done_flag not in ("0", "1"):
        raise CorruptDataError(f"Invalid done flag {done_flag!r}: {line!r}")
    is_done = done_flag == "1"

    n_times = _TIME_FIELD_COUNT[task_type]
    times: list[str] = []
    if n_times:
        pieces = raw.rsplit(FIELD_SEPARATOR, n_times)
        body = pieces[0].split(FIELD_SEPARATOR, 2)
        if len(pieces) < n_times + 1 or len(body) < 3:
            raise CorruptDataError(
                f"Expected {3 + n_times} fields for a {task_type.value} task: {line!r}"
            )
        description = body[2]
        times = pieces[1:]
    else:
        description = head[2]

    try:
        if task_type is TaskType.DEADLINE:
            return Deadline.from_text(description, times[0], is_done=is_done)
        if task_type is TaskType.EVENT:
            return Event.from_text(description, times[0], times[1], is_done=is_done)
        return Todo(description, is_done=is_done)
    except (TimeFormatError, ValidationError) as e:
        raise CorruptDataError(f"{e.message.splitlines()[0]} ({line!r})") from e
