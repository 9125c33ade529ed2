"""Public API surface for statekeeper."""
from __future__ import annotations

from dataclasses import dataclass, field

from statekeeper.obs.events import EventBus
from statekeeper.persist.history import History
from statekeeper.router import ActionRouter
from statekeeper.state.holder import StateHolder


@dataclass
class StateKeeperApp:
    """Container wiring a holder to its history behind an action router."""

    holder: StateHolder
    event_bus: EventBus = field(default_factory=EventBus)
    router: ActionRouter = field(default_factory=ActionRouter)
    history: History | None = None

    def __post_init__(self) -> None:
        if self.history is None:
            self.history = History(self.holder, event_bus=self.event_bus)
        elif self.history.holder is not self.holder:
            raise ValueError("history must be bound to the app's holder")
        self._register_default_actions()

    def handle(self, payload: dict) -> dict:
        """Dispatch an API payload and return a canonical response."""

        action = payload.get("action")
        if not action:
            raise KeyError("payload must include 'action'")
        params = payload.get("params") or {}
        first_event = len(self.event_bus.events)
        result = self.router.dispatch(action, params)
        self.event_bus.emit(level="info", msg=f"Executed action '{action}'", action=action)
        return {
            "ok": True,
            "result": result,
            "events": [dict(event.__dict__) for event in self.event_bus.events[first_event:]],
        }

    def _register_default_actions(self) -> None:
        self.router.register("mutate", self._handle_mutate)
        self.router.register("backup", self._handle_backup)
        self.router.register("undo", self._handle_undo)
        self.router.register("list_labels", self._handle_list_labels)

    def _handle_mutate(self, params: dict) -> dict:
        times = int(params.get("times", 1))
        if times < 1:
            raise ValueError("'times' must be a positive integer")
        for _ in range(times):
            self.holder.mutate()
        return {"current": self._current()}

    def _handle_backup(self, params: dict) -> dict:
        self.history.backup()
        return self._history_payload()

    def _handle_undo(self, params: dict) -> dict:
        self.history.undo()
        payload = self._history_payload()
        payload["current"] = self._current()
        return payload

    def _handle_list_labels(self, params: dict) -> dict:
        return self._history_payload()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        return self.holder.describe(self.holder.state)

    def _history_payload(self) -> dict:
        labels = list(self.history.list_labels())
        return {"labels": labels, "size": len(labels)}
