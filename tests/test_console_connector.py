# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest

from taskmate.connectors import console_connector
from taskmate.connectors.console_connector import run_console_loop


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_loop_runs_commands_until_bye(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["todo read book", "", "bogus", "list", "bye", "todo never"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Hello! I'm Taskmate." in out
    assert "Got it. I've added this task:" in out
    assert "Please specify the type of task: todo, deadline, or event." in out
    assert "1. [T][ ] read book" in out
    assert "Bye. Hope to see you again soon!" in out
    # Nothing after bye is processed.
    assert state.task_list.count() == 1


def test_loop_stops_on_eof(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["todo a"])
    run_console_loop(state)
    assert state.task_list.count() == 1
    assert "Bye." not in capsys.readouterr().out


def test_unexpected_errors_do_not_end_the_loop(state, monkeypatch, capsys) -> None:
    calls = {"n": 0}
    real_respond = console_connector.respond

    def flaky(state_, line):
        calls["n"] += 1
        if calls["n"] == 1:
            raise RuntimeError("boom")
        return real_respond(state_, line)

    monkeypatch.setattr(console_connector, "respond", flaky)
    _feed(monkeypatch, ["list", "todo after crash"])

    run_console_loop(state)

    assert "Internal error while handling a command." in capsys.readouterr().out
    assert state.task_list.count() == 1
