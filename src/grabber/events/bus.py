from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class EventBus:
    """Synchronous channel between the game and whoever presents it.

    GrabberGame emits board_reset, item_collected, victory and marker_moved
    here; BoardPresenter (and tests) subscribe. Handlers run in subscription
    order before emit returns.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Callable[..., Any]]] = {}

    def subscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Register handler for one of the game channels in grabber.events.types.

        The handler receives the channel payload as keyword arguments.
        Subscribing the same handler twice is a no-op.
        """
        handlers = self._handlers.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug("Subscribed %s to '%s'", handler, event)

    def unsubscribe(self, event: str, handler: Callable[..., Any]) -> None:
        handlers = self._handlers.get(event)
        if not handlers:
            return
        if handler in handlers:
            handlers.remove(handler)
            logger.debug("Unsubscribed %s from '%s'", handler, event)
        if not handlers:
            del self._handlers[event]

    def clear(self) -> None:
        self._handlers.clear()

    def emit(self, event: str, **payload: Any) -> List[Any]:
        """Deliver a game event to its handlers.

        A handler that raises is logged and skipped; the rest still run.

        Returns:
            Return values of the handlers that completed.
        """
        handlers = list(self._handlers.get(event, []))
        if not handlers:
            logger.debug("No handlers for '%s' (payload=%s)", event, payload)
            return []
        logger.debug("Emitting '%s' to %d handlers (payload=%s)", event, len(handlers), payload)
        results: List[Any] = []
        for handler in handlers:
            try:
                results.append(handler(**payload))
            except Exception as exc:
                logger.exception("Handler %s failed on '%s': %s", handler, event, exc)
        return results
