"""Event Registry - symbolic handler names to behavior."""

from collections.abc import Callable
from typing import Any

from core import get_logger

logger = get_logger(__name__)

Handler = Callable[[Any], None]


class EventRegistry:
    """
    Maps symbolic event names to handlers.

    Nodes reference handlers by name only, so the same payload can come from
    any source while the host application supplies behavior. Registration is
    expected once at startup; lookups of unknown names are no-ops.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Register a handler. Re-registering a name replaces the old handler."""
        if name in self._handlers:
            logger.debug("handler_replaced", name=name)
        self._handlers[name] = handler
        logger.debug("handler_registered", name=name)

    def handler(self, name: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""
        def decorator(fn: Handler) -> Handler:
            self.register(name, fn)
            return fn
        return decorator

    def get(self, name: str) -> Handler | None:
        return self._handlers.get(name)

    def has(self, name: str) -> bool:
        return name in self._handlers

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def invoke(self, name: str, payload: Any = None) -> None:
        """
        Invoke a handler by name, fire-and-forget.

        Unknown names do nothing. A handler that raises is logged and
        isolated so one node's behavior cannot break another's.
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("handler_missing", name=name)
            return

        try:
            handler(payload)
        except Exception as e:
            logger.error("handler_failed", name=name, error=str(e), exc_info=True)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
