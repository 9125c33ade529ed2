"""Undo history of opaque holder snapshots."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from statekeeper.obs.events import EventBus
from statekeeper.state.errors import TypeMismatch
from statekeeper.state.holder import StateHolder
from statekeeper.state.snapshot import Snapshot

LOGGER = logging.getLogger(__name__)


class LabelView:
    """Read-only view over snapshot labels, oldest first.

    The view is fixed to the snapshots present when it was created; labels are
    produced lazily and every iteration starts again from the oldest one.
    """

    __slots__ = ("_snapshots",)

    def __init__(self, snapshots: Sequence[Snapshot]) -> None:
        self._snapshots = tuple(snapshots)

    def __iter__(self) -> Iterator[str]:
        return (snapshot.label for snapshot in self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}({list(self)!r})"


@dataclass(eq=False)
class History:
    """Keep snapshots of one holder and restore them last-in first-out.

    The history only ever sees snapshots through their public metadata; the
    captured state stays sealed until the bound holder restores from it.
    Undone snapshots are discarded, there is no redo.  The holder is fixed at
    construction; events go to ``event_bus`` when one is given.
    """

    holder: StateHolder
    event_bus: Optional[EventBus] = field(default=None, kw_only=True)
    _snapshots: List[Snapshot] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "holder" and "holder" in self.__dict__:
            raise AttributeError("History is bound to its holder for its whole lifetime")
        object.__setattr__(self, name, value)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def is_empty(self) -> bool:
        return not self._snapshots

    def backup(self) -> None:
        """Capture the holder's current state and push it on the history."""

        with self.holder.lock, self._lock:
            snapshot = self.holder.capture()
            self._snapshots.append(snapshot)
            size = len(self._snapshots)
        LOGGER.info("Saved %s holder state: %s", self.holder.kind, snapshot.label)
        self._emit(
            level="info",
            msg=f"Saved state '{snapshot.label}'",
            action="backup",
            labels=[snapshot.label],
            extras={"size": size},
        )

    def undo(self) -> None:
        """Restore the holder from the most recent snapshot, if there is one."""

        with self.holder.lock, self._lock:
            if not self._snapshots:
                LOGGER.debug("Nothing to undo for %s holder", self.holder.kind)
                self._emit(
                    level="debug",
                    msg="History is empty; nothing to undo",
                    action="undo_skipped",
                    extras={"size": 0},
                )
                return

            snapshot = self._snapshots.pop()
            try:
                self.holder.restore_from(snapshot)
            except TypeMismatch:
                self._snapshots.append(snapshot)
                raise
            size = len(self._snapshots)

        LOGGER.info("Restored %s holder state to: %s", self.holder.kind, snapshot.label)
        self._emit(
            level="info",
            msg=f"Restored state to '{snapshot.label}'",
            action="undo",
            labels=[snapshot.label],
            extras={"size": size},
        )

    def list_labels(self) -> LabelView:
        """Return the labels of the stored snapshots in the order they were saved."""

        with self._lock:
            return LabelView(self._snapshots)

    def show_history(self) -> List[str]:
        """Log the stored snapshot labels and return them."""

        labels = list(self.list_labels())
        LOGGER.info("History of %s holder holds %d snapshot(s)", self.holder.kind, len(labels))
        for label in labels:
            LOGGER.info("  %s", label)
        return labels

    def _emit(self, **event) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(**event)
