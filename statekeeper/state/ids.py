"""Utility helpers for generating state tokens and timestamps."""
from __future__ import annotations

import datetime as _dt
import random
import uuid
from typing import Callable


def new_token(length: int = 4) -> str:
    """Return a random upper-case hex token of ``length`` characters."""

    return uuid.uuid4().hex[-length:].upper()


def seeded_tokens(seed: int, length: int = 4) -> Callable[[], str]:
    """Return a token generator that yields a reproducible sequence for ``seed``."""

    rng = random.Random(seed)

    def _next() -> str:
        return "".join(rng.choice("0123456789ABCDEF") for _ in range(length))

    return _next


def utc_timestamp() -> _dt.datetime:
    """Return the current time as an aware UTC datetime."""

    return _dt.datetime.now(_dt.timezone.utc)


def utc_now() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return utc_timestamp().isoformat()
