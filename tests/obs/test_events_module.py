"""Tests for :mod:`statekeeper.obs.events`."""

from __future__ import annotations

from statekeeper.obs.events import EventBus


def test_event_bus_emit_and_history():
    bus = EventBus()
    event = bus.emit(level="info", msg="Test", action="act", labels=["A 12:00:00"], extras={"detail": 1})

    assert event.msg == "Test"
    assert event.labels == ["A 12:00:00"]
    assert not hasattr(event, "actor")
    history = list(bus.history())
    assert history == [event]


def test_event_bus_history_filters_by_action():
    bus = EventBus()
    bus.emit(level="info", msg="one", action="backup")
    skipped = bus.emit(level="debug", msg="two", action="undo_skipped")

    assert bus.history(action="undo_skipped") == (skipped,)
    assert bus.history(action="missing") == ()
