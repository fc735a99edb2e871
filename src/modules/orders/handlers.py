"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.models.records import Event

logger = structlog.get_logger(__name__)


def order_created_handler(event: Event) -> None:
    logger.info(
        f"Processing creation of order {event.model_id}",
        order_id=event.model_id,
        total=str(event.total),
    )


def order_updated_handler(event: Event) -> None:
    logger.info(
        f"Processing update of order {event.model_id}",
        order_id=event.model_id,
        changed=sorted(event.changes),
    )


def order_deleted_handler(event: Event) -> None:
    logger.info(
        f"Processing deletion of order {event.model_id}",
        order_id=event.model_id,
    )
