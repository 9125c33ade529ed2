"""Snapshot history for state holders."""

from .history import History, LabelView

__all__ = ["History", "LabelView"]
