"""Composition root.

Builds the registry and its collaborators once, registers every bounded
context, and hands back the wired services.  Registration completes here,
before any creation traffic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from config.settings import configure_logging
from modules.core.repositories.memory_repository import InMemoryModelRepository
from modules.models.factory import ModelFactory
from modules.orders.apps import register_order_models, subscribe_order_handlers
from modules.orders.services import OrderService
from shared.infrastructure.bus import InMemoryObserver


@dataclass(frozen=True)
class Application:
    factory: ModelFactory
    observer: InMemoryObserver
    repository: InMemoryModelRepository
    orders: OrderService


def build_application(
    generate_id: Optional[Callable[[], str]] = None,
    configure_logs: bool = True,
) -> Application:
    if configure_logs:
        configure_logging()

    factory = ModelFactory(generate_id=generate_id)
    observer = InMemoryObserver()
    repository = InMemoryModelRepository()

    register_order_models(factory)
    subscribe_order_handlers(observer)

    return Application(
        factory=factory,
        observer=observer,
        repository=repository,
        orders=OrderService(factory=factory, repository=repository, observer=observer),
    )
