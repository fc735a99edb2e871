"""Wiring for the Orders bounded context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.orders.constants import MODEL_NAME, ORDER_DELETED, ORDER_UPDATED
from modules.orders.events import order_created, order_deleted, order_updated
from modules.orders.handlers import order_deleted_handler, order_updated_handler
from modules.orders.models import build_order
from shared.domain.events import EventType

if TYPE_CHECKING:
    from modules.models.factory import ModelFactory
    from shared.domain.bus import IObserver


def register_order_models(factory: ModelFactory) -> None:
    factory.register_model(MODEL_NAME, build_order)
    factory.register_event(EventType.CREATE, MODEL_NAME, order_created)
    factory.register_event(EventType.UPDATE, MODEL_NAME, order_updated)
    factory.register_event(EventType.DELETE, MODEL_NAME, order_deleted)


def subscribe_order_handlers(observer: IObserver) -> None:
    """Subscribe the UPDATE/DELETE handlers.

    ``order_created_handler`` is passed to the add-order use case instead,
    which subscribes it to ``CREATEORDER`` together with the default logger.
    """
    observer.on(ORDER_UPDATED, order_updated_handler)
    observer.on(ORDER_DELETED, order_deleted_handler)
