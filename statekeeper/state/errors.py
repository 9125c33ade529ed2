"""Errors raised by state holders and snapshots."""
from __future__ import annotations


class TypeMismatch(TypeError):
    """A snapshot was handed to a holder of a different kind."""

    def __init__(self, expected: str | None, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = f"Snapshot of kind {actual!r} cannot be opened with the supplied key"
        else:
            message = f"Snapshot of kind {actual!r} cannot be restored into a {expected!r} holder"
        super().__init__(message)
