"""Tests for :mod:`statekeeper.api`."""

from __future__ import annotations

import pytest

from statekeeper.api import StateKeeperApp
from statekeeper.persist.history import History
from statekeeper.state.errors import TypeMismatch
from statekeeper.state.holder import StateHolder


@pytest.fixture()
def app() -> StateKeeperApp:
    return StateKeeperApp(holder=StateHolder("A", generator=iter(["B", "C", "D"]).__next__))


def _states(labels: list[str]) -> list[str]:
    return [label.split(" ")[0] for label in labels]


def test_handle_runs_scenario(app: StateKeeperApp) -> None:
    app.handle({"action": "backup"})
    assert app.handle({"action": "mutate"})["result"]["current"] == "B"
    app.handle({"action": "backup"})
    app.handle({"action": "mutate"})

    response = app.handle({"action": "undo"})
    assert response["ok"] is True
    assert response["result"]["current"] == "B"
    assert _states(response["result"]["labels"]) == ["A"]

    response = app.handle({"action": "undo"})
    assert response["result"]["current"] == "A"
    assert response["result"]["size"] == 0

    response = app.handle({"action": "undo"})
    assert response["result"]["current"] == "A"
    assert [event["action"] for event in response["events"]] == ["undo_skipped", "undo"]


def test_handle_returns_events_for_request_only(app: StateKeeperApp) -> None:
    app.handle({"action": "backup"})
    response = app.handle({"action": "list_labels"})

    assert [event["action"] for event in response["events"]] == ["list_labels"]
    assert response["result"]["size"] == 1


def test_mutate_accepts_times(app: StateKeeperApp) -> None:
    response = app.handle({"action": "mutate", "params": {"times": 3}})
    assert response["result"]["current"] == "D"

    with pytest.raises(ValueError):
        app.handle({"action": "mutate", "params": {"times": 0}})


def test_handle_requires_action(app: StateKeeperApp) -> None:
    with pytest.raises(KeyError):
        app.handle({"params": {}})
    with pytest.raises(KeyError):
        app.handle({"action": "redo"})


def test_history_must_share_holder() -> None:
    holder = StateHolder("A")
    other = StateHolder("B")

    with pytest.raises(ValueError):
        StateKeeperApp(holder=holder, history=History(other))

    history = History(holder)
    assert StateKeeperApp(holder=holder, history=history).history is history


def test_apps_do_not_share_state() -> None:
    first = StateKeeperApp(holder=StateHolder("A"))
    second = StateKeeperApp(holder=StateHolder("A"))

    first.handle({"action": "backup"})

    assert len(first.history) == 1
    assert len(second.history) == 0
    assert second.event_bus.events == []


def test_undo_surfaces_type_mismatch(app: StateKeeperApp, monkeypatch) -> None:
    app.handle({"action": "backup"})

    def _reject(snapshot):
        raise TypeMismatch(expected="state", actual="other")

    monkeypatch.setattr(app.holder, "restore_from", _reject)

    with pytest.raises(TypeMismatch):
        app.handle({"action": "undo"})
    assert len(app.history) == 1


def test_handle_treats_null_params_as_empty(app: StateKeeperApp) -> None:
    response = app.handle({"action": "mutate", "params": None})
    assert response["result"]["current"] == "B"
