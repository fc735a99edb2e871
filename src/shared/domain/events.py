"""Event type vocabulary and the event naming protocol.

Listeners subscribe by event name, so the name must be reproducible from
``(event_type, model_name)`` alone.  ``create_event_name`` is the single
place that defines it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from shared.domain.exceptions import InvalidArgument


class EventType(str, Enum):
    """Closed set of lifecycle event types."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: Any) -> EventType:
        """Convert external input (any case) into an ``EventType``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise InvalidArgument(f"eventType missing or invalid: {value!r}")

    @property
    def time_key(self) -> str:
        return f"{self.value.lower()}_time"


def check_model_name(model_name: Any) -> str:
    """Return the canonical (uppercase) form of a model-type name."""
    if isinstance(model_name, str) and model_name.strip():
        return model_name.upper()
    raise InvalidArgument(f"modelName missing or invalid: {model_name!r}")


def create_event_name(event_type: Any, model_name: Any) -> str:
    """Build the canonical event name, e.g. ``CREATEORDER``."""
    return EventType.parse(event_type).value + check_model_name(model_name)
