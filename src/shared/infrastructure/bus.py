"""In-memory observer implementation."""

from __future__ import annotations

import inspect
from typing import Any, Dict, List, Optional, Tuple

import structlog

from shared.domain.bus import EventHandler, IObserver

logger = structlog.get_logger(__name__)


class InMemoryObserver(IObserver):
    """Simple in-process observer keyed by event name.

    Handlers run in subscription order.  Both plain functions and coroutine
    functions are accepted.  A failing handler stops the fan-out and the
    exception reaches the caller of ``notify``.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._history: List[Tuple[str, Any]] = []

    def on(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event_name, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug("observer.subscribed", event_name=event_name)

    async def notify(self, event_name: str, event: Any) -> None:
        self._history.append((event_name, event))
        for handler in list(self._handlers.get(event_name, [])):
            result = handler(event)
            if inspect.isawaitable(result):
                await result

    def handlers_for(self, event_name: str) -> List[EventHandler]:
        return list(self._handlers.get(event_name, []))

    def get_history(self, event_name: Optional[str] = None) -> List[Tuple[str, Any]]:
        """Notified events, optionally filtered by name. For testing."""
        if event_name is None:
            return list(self._history)
        return [(n, e) for n, e in self._history if n == event_name]

    def clear_history(self) -> None:
        self._history.clear()
