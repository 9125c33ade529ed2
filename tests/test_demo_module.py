"""Tests for :mod:`statekeeper.demo`."""

from __future__ import annotations

import pytest

from statekeeper import demo
from statekeeper.persist.history import History
from statekeeper.state.holder import StateHolder


def test_run_restores_in_reverse_order(capsys):
    holder = StateHolder("A", generator=iter(["B", "C", "D"]).__next__)
    history = History(holder)

    restored = demo.run(holder, history, rounds=3, undos=2)

    assert restored == ["C", "B"]
    assert len(history) == 1
    output = capsys.readouterr().out
    assert "state changed to: D" in output
    assert "History:" in output


def test_main_with_seed_is_reproducible(capsys):
    assert demo.main(["--seed", "3", "--initial", "start", "--log-level", "WARNING"]) == 0
    first = capsys.readouterr().out
    assert demo.main(["--seed", "3", "--initial", "start", "--log-level", "WARNING"]) == 0
    second = capsys.readouterr().out

    assert "initial state: start" in first
    assert [line for line in first.splitlines() if "state" in line] == [
        line for line in second.splitlines() if "state" in line
    ]


def test_main_extra_undos_are_noops(capsys):
    assert demo.main(["--rounds", "1", "--undos", "3", "--initial", "X", "--log-level", "WARNING"]) == 0
    output = capsys.readouterr().out
    assert output.count("state restored to: X") == 3


def test_main_rejects_negative_counts():
    with pytest.raises(SystemExit):
        demo.main(["--rounds", "-1"])


def test_main_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as excinfo:
        demo.main(["--log-level", "bogus"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_main_accepts_lower_case_log_level(capsys):
    assert demo.main(["--rounds", "0", "--undos", "0", "--log-level", "warning"]) == 0


def test_main_rejects_unknown_configured_log_level(monkeypatch, capsys):
    monkeypatch.setenv("STATEKEEPER_LOG_LEVEL", "loud")
    with pytest.raises(SystemExit) as excinfo:
        demo.main(["--rounds", "0"])
    assert excinfo.value.code == 2
    assert "STATEKEEPER_LOG_LEVEL" in capsys.readouterr().err
