"""State holders that capture and restore themselves through snapshots."""
from __future__ import annotations

import copy
import datetime as _dt
import logging
import threading
from functools import partial
from typing import Any, Callable, ClassVar, Dict, Optional

from statekeeper.config import token_length

from .errors import TypeMismatch
from .ids import new_token, utc_timestamp
from .snapshot import Snapshot

LOGGER = logging.getLogger(__name__)

StateGenerator = Callable[[], Any]
Clock = Callable[[], _dt.datetime]

_SEAL_KEYS: Dict[str, object] = {}
_SEAL_KEYS_LOCK = threading.Lock()


def _seal_key(kind: str) -> object:
    """Return the key shared by every holder of ``kind``."""

    with _SEAL_KEYS_LOCK:
        return _SEAL_KEYS.setdefault(kind, object())


class StateHolder:
    """Own a mutable state value and roll it back from snapshots.

    Subclasses define their own ``kind``; a holder only accepts snapshots
    captured by a holder of the same kind.  ``generator`` produces the next
    state for :meth:`mutate` and ``clock`` stamps captured snapshots, both
    defaulting to random tokens and the current UTC time.
    """

    kind: ClassVar[str] = "state"

    def __init__(
        self,
        initial_state: Any,
        *,
        generator: Optional[StateGenerator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._state = copy.deepcopy(initial_state)
        self._generator = generator or partial(new_token, token_length())
        self._clock = clock or utc_timestamp
        self.lock = threading.RLock()
        LOGGER.info("%s holder initial state: %s", self.kind, self.describe(self._state))

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}(kind={self.kind!r})"

    @property
    def state(self) -> Any:
        """Copy of the current state; assigning to it is not supported."""

        with self.lock:
            return copy.deepcopy(self._state)

    def describe(self, state: Any) -> str:
        """Return the display text used in snapshot labels."""

        return str(state)

    def mutate(self) -> None:
        """Replace the current state with the next generated value."""

        with self.lock:
            self._state = self._generator()
            LOGGER.info("%s holder state changed to: %s", self.kind, self.describe(self._state))

    def capture(self) -> Snapshot:
        """Seal a copy of the current state into a new :class:`Snapshot`."""

        with self.lock:
            return Snapshot(
                self._state,
                kind=self.kind,
                key=_seal_key(self.kind),
                created_at=self._clock(),
                describe=self.describe,
            )

    def restore_from(self, snapshot: Snapshot) -> None:
        """Overwrite the current state with the one sealed in ``snapshot``."""

        if not isinstance(snapshot, Snapshot):
            raise TypeMismatch(expected=self.kind, actual=type(snapshot).__name__)
        if snapshot.kind != self.kind:
            raise TypeMismatch(expected=self.kind, actual=snapshot.kind)

        state = snapshot.unseal(_seal_key(self.kind))
        with self.lock:
            self._state = state
        LOGGER.info("%s holder state restored to: %s", self.kind, snapshot.label)
