"""Observer interfaces for in-process event dispatch."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Union

EventHandler = Callable[[Any], Union[Awaitable[None], None]]


class IObserver(Protocol):
    """Dispatches events to the handlers subscribed under an event name."""

    def on(self, event_name: str, handler: EventHandler) -> None: ...

    async def notify(self, event_name: str, event: Any) -> None: ...
