"""Opaque, immutable captures of holder state.

A :class:`Snapshot` carries display metadata (``label``, ``created_at`` and
the producing holder ``kind``) in the open, while the captured state itself is
sealed inside a closure.  The state can only be read back by presenting the
key it was sealed with, which is held by the holders of the matching kind.
Anything else that keeps a snapshot around, such as
:class:`~statekeeper.persist.history.History`, can list and display it but has
no path to the value it protects.
"""
from __future__ import annotations

import copy
import datetime as _dt
from typing import Any, Callable, NoReturn

from .errors import TypeMismatch

Describe = Callable[[Any], str]


def _seal(state: Any, key: object, kind: str) -> Callable[[object], Any]:
    def _unseal(candidate: object) -> Any:
        if candidate is not key:
            raise TypeMismatch(expected=None, actual=kind)
        return copy.deepcopy(state)

    return _unseal


class Snapshot:
    """Point-in-time capture produced by :meth:`StateHolder.capture`."""

    __slots__ = ("_kind", "_created_at", "_label", "_unseal")

    def __init__(
        self,
        state: Any,
        *,
        kind: str,
        key: object,
        created_at: _dt.datetime,
        describe: Describe = str,
    ) -> None:
        sealed = copy.deepcopy(state)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_created_at", created_at)
        object.__setattr__(self, "_label", f"{describe(sealed)} {created_at:%H:%M:%S}")
        object.__setattr__(self, "_unseal", _seal(sealed, key, kind))

    @property
    def label(self) -> str:
        """State text followed by the capture time truncated to seconds."""

        return self._label

    @property
    def created_at(self) -> _dt.datetime:
        return self._created_at

    @property
    def kind(self) -> str:
        """Tag of the holder kind that produced this snapshot."""

        return self._kind

    def unseal(self, key: object) -> Any:
        """Return a copy of the captured state if ``key`` matches the seal."""

        return self._unseal(key)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Snapshot":
        return self

    def __deepcopy__(self, memo: dict) -> "Snapshot":
        return self

    def __reduce__(self) -> NoReturn:
        raise TypeError("Snapshots live only as long as the process that captured them")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self._kind!r}, label={self._label!r})"
