"""Default event handlers shared by every model type."""

from __future__ import annotations

import structlog

from modules.models.records import Event

logger = structlog.get_logger(__name__)


def log_event(event: Event) -> None:
    """Write the dispatched event to the structured log."""
    logger.info(
        "model_event.dispatched",
        event_name=event.event_name,
        event_id=event.id,
        model_name=event.model_name,
        **event.timestamps,
    )
