"""Name-based dispatch of app actions to their handlers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Protocol

LOGGER = logging.getLogger(__name__)


class ActionHandler(Protocol):
    """Callable that turns request ``params`` into a result payload."""

    def __call__(self, params: dict) -> dict:  # pragma: no cover - interface
        ...


@dataclass
class ActionRouter:
    """Map action names to handlers and dispatch requests to them."""

    registry: Dict[str, ActionHandler] = field(default_factory=dict)

    def __contains__(self, action: object) -> bool:
        return action in self.registry

    def register(self, action: str, handler: ActionHandler, *, replace: bool = False) -> None:
        """Register ``handler`` under ``action``.

        Registering a name twice is refused unless ``replace`` is set.
        """

        if action in self.registry and not replace:
            raise ValueError(f"Action '{action}' is already registered")
        self.registry[action] = handler

    def actions(self) -> list[str]:
        """Return the registered action names, sorted."""

        return sorted(self.registry)

    def dispatch(self, action: str, params: dict) -> dict:
        """Run the handler registered for ``action`` with ``params``."""

        handler = self.registry.get(action)
        if handler is None:
            raise KeyError(f"Unknown action: {action}")
        LOGGER.debug("Dispatching action %r", action)
        return handler(params)
