"""Event bus primitives."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from statekeeper.state.ids import utc_now


@dataclass
class Event:
    """Simple event structure stored in the event bus."""

    ts: str
    level: str
    msg: str
    action: str | None = None
    labels: List[str] = field(default_factory=list)
    extras: dict | None = None


@dataclass
class EventBus:
    """Append-only in-memory event bus."""

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        *,
        level: str,
        msg: str,
        action: str | None = None,
        labels: Iterable[str] | None = None,
        extras: dict | None = None,
    ) -> Event:
        """Create and store a new :class:`Event`."""

        event = Event(
            ts=utc_now(),
            level=level,
            msg=msg,
            action=action,
            labels=list(labels or []),
            extras=extras,
        )
        self.events.append(event)
        return event

    def history(self, *, action: str | None = None) -> Iterable[Event]:
        """Return the chronological event history, optionally for one ``action``."""

        if action is None:
            return tuple(self.events)
        return tuple(event for event in self.events if event.action == action)
