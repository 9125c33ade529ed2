"""statekeeper package initialization.

This module exposes the holder, snapshot and history types used by callers
that want undo over an encapsulated state value.
"""

from .api import StateKeeperApp
from .persist.history import History
from .state import Snapshot, StateHolder, TypeMismatch

__all__ = ["History", "Snapshot", "StateHolder", "StateKeeperApp", "TypeMismatch"]
