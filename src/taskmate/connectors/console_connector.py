# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..core.engine import Reply, greet, respond
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except OSError:
        print(line)


def _print_reply(reply: Reply) -> None:
    lines = reply.text.splitlines() or [""]
    # Continuation lines are indented under the timestamp.
    indent = " " * (len(_ts_local()) + 3)
    print(f"[{_ts_local()}] {lines[0]}")
    for line in lines[1:]:
        print(f"{indent}{line}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    _print_reply(greet(state))

    while True:
        try:
            user_input = input(PROMPT).strip()
            _rewrite_prev_line(f"[{_ts_local()}] {PROMPT}{user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            reply = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = Reply(text="Internal error while handling a command.")

        _print_reply(reply)
        if reply.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
