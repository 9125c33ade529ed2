"""State subpackage containing holders, snapshots and their helpers."""

from .errors import TypeMismatch
from .holder import StateHolder
from .snapshot import Snapshot

__all__ = ["Snapshot", "StateHolder", "TypeMismatch"]
