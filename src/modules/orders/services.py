"""Order service layer (Use Cases).

Thin layer over the generic model use cases for the ``ORDER`` type:

- ``add_order``: delegates to ``AddModelService`` (create, save, notify).
- ``delete_order``: removes a stored order and announces ``DELETEORDER``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

import structlog

from modules.models.services import AddModelService
from modules.orders.constants import MODEL_NAME
from modules.orders.exceptions import OrderNotFound
from modules.orders.handlers import order_created_handler
from shared.domain.events import EventType

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.models.factory import ModelFactory
    from modules.models.records import Event, Model
    from shared.domain.bus import EventHandler, IObserver

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the registry and collaborators via constructor injection (DIP).
    """

    def __init__(
        self,
        factory: ModelFactory,
        repository: IRepository[Model],
        observer: IObserver,
        handlers: Optional[Iterable[EventHandler]] = None,
    ) -> None:
        self._factory = factory
        self._repository = repository
        self._observer = observer
        self._add_order = AddModelService(
            factory=factory,
            model_name=MODEL_NAME,
            repository=repository,
            observer=observer,
            handlers=[order_created_handler, *(handlers or [])],
        )

    async def add_order(self, data: Mapping[str, Any]) -> Model:
        return await self._add_order(data)

    async def delete_order(self, order_id: str) -> Event:
        """Remove an order and notify ``DELETEORDER`` listeners.

        Raises:
            OrderNotFound: no order is stored under ``order_id``.
        """
        order = await self._repository.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found.")

        event = await self._factory.create_event(EventType.DELETE, MODEL_NAME, order)
        await self._repository.delete(order_id)
        await self._observer.notify(event.get_event_name(), event)

        logger.info("order.deleted", order_id=order_id)
        return event
