# src/taskmate/errors.py

"""
User-facing error types.

Every error raised by the core carries an ErrorKind so the engine can turn it
into an explicit Reply. str(error) is the message shown to the user.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_TASK = "empty_task"
    FORMAT = "format"
    TIME_FORMAT = "time_format"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    INDEX = "index"
    VALIDATION = "validation"
    CORRUPT_DATA = "corrupt_data"
    STORAGE = "storage"


class TaskmateError(Exception):
    """Base class for recoverable errors reported back to the user."""

    kind: ErrorKind = ErrorKind.VALIDATION

    @property
    def message(self) -> str:
        return str(self)


class EmptyTaskError(TaskmateError):
    kind = ErrorKind.EMPTY_TASK


class FormatError(TaskmateError):
    kind = ErrorKind.FORMAT


class TimeFormatError(TaskmateError, ValueError):
    kind = ErrorKind.TIME_FORMAT


class UnrecognizedCommandError(TaskmateError):
    kind = ErrorKind.UNRECOGNIZED_COMMAND


class TaskIndexError(TaskmateError, IndexError):
    kind = ErrorKind.INDEX


class ValidationError(TaskmateError, ValueError):
    kind = ErrorKind.VALIDATION


class CorruptDataError(TaskmateError, ValueError):
    kind = ErrorKind.CORRUPT_DATA


class StorageError(TaskmateError, OSError):
    kind = ErrorKind.STORAGE
