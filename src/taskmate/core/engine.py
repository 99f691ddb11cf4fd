# src/taskmate/core/engine.py

"""
Entry points used by front ends.

parse_line() and execute() raise/convert typed errors; respond() is the
boundary: it always returns a Reply and never lets a TaskmateError escape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import ErrorKind, TaskmateError
from .commands import Command, GreetCommand
from .parser import parse_command
from .state import AppState

logger = logging.getLogger(__name__)

SAVE_FAILED_NOTE = "(Could not save your tasks to disk. Changes are kept for this session.)"


@dataclass(slots=True, frozen=True)
class Reply:
    text: str
    error: ErrorKind | None = None
    is_exit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(state: AppState, line: str) -> Command:
    return parse_command(line, state.task_list)


def _persist(state: AppState) -> bool:
    repo = state.task_repo
    if repo is None:
        return True
    return repo.save_all(state.task_list.all())


def execute(state: AppState, command: Command) -> Reply:
    """Run a command under the state lock and persist if it changed the list."""
    with state.lock:
        try:
            text = command.run()
        except TaskmateError as e:
            logger.debug("%s failed: %s (%s)", type(command).__name__, e.kind, e)
            return Reply(text=e.message, error=e.kind)

        if command.mutates and not _persist(state):
            logger.warning("Task list not persisted after %s", type(command).__name__)
            text = f"{text}\n{SAVE_FAILED_NOTE}"

    return Reply(text=text, is_exit=command.is_exit)


def respond(state: AppState, line: str) -> Reply:
    """Handle one input line end to end."""
    try:
        command = parse_line(state, line)
    except TaskmateError as e:
        logger.debug("Parse failed for %r: %s", line, e.kind)
        return Reply(text=e.message, error=e.kind)
    return execute(state, command)


def greet(state: AppState) -> Reply:
    return execute(state, GreetCommand(state.app_name))
