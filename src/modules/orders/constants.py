"""Order domain constants."""

from shared.domain.events import EventType, create_event_name

MODEL_NAME = "ORDER"

ORDER_CREATED = create_event_name(EventType.CREATE, MODEL_NAME)
ORDER_UPDATED = create_event_name(EventType.UPDATE, MODEL_NAME)
ORDER_DELETED = create_event_name(EventType.DELETE, MODEL_NAME)
