"""Enrichment pipeline for freshly constructed models and events.

Each decorator takes an ``AttributeBag`` and returns a new one with one
derived attribute filled in.  Bags are frozen; decorators use
``dataclasses.replace`` and never touch their input.

- ``enrich_model``: ``add_id`` -> ``add_model_name`` -> ``add_timestamp``
- ``enrich_event``: ``add_id`` -> ``add_event_name`` -> ``add_timestamp``

``freeze_model`` / ``freeze_event`` turn the final bag into the
immutable record handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from email.utils import format_datetime
from functools import reduce
from typing import Any, Callable, Mapping, Optional

from modules.models.records import Event, Model
from shared.domain.events import EventType, check_model_name, create_event_name

Decorator = Callable[["AttributeBag"], "AttributeBag"]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime, fmt: str = "http") -> str:
    """Render ``moment`` as an RFC 1123 GMT string (``http``) or ISO 8601."""
    moment = moment.astimezone(timezone.utc)
    if fmt == "iso":
        return moment.isoformat()
    return format_datetime(moment, usegmt=True)


@dataclass(frozen=True)
class AttributeBag:
    """Intermediate value passed along the pipeline."""

    payload: Mapping[str, Any]
    model_name: str
    generate_id: Callable[[], str]
    clock: Callable[[], datetime] = utc_now
    timestamp_format: str = "http"
    event_type: Optional[EventType] = None
    id: Optional[str] = None
    event_name: Optional[str] = None
    timestamps: Mapping[str, str] = field(default_factory=dict)


def compose(*decorators: Decorator) -> Decorator:
    """Left-to-right composition of bag decorators."""

    def pipeline(bag: AttributeBag) -> AttributeBag:
        return reduce(lambda acc, decorate: decorate(acc), decorators, bag)

    return pipeline


def add_id(bag: AttributeBag) -> AttributeBag:
    return replace(bag, id=str(bag.generate_id()))


def add_model_name(bag: AttributeBag) -> AttributeBag:
    return replace(bag, model_name=check_model_name(bag.model_name))


def add_event_name(bag: AttributeBag) -> AttributeBag:
    return replace(bag, event_name=create_event_name(bag.event_type, bag.model_name))


def add_timestamp(bag: AttributeBag) -> AttributeBag:
    """Stamp ``<event type>_time``; models without an event type get ``create_time``."""
    event_type = bag.event_type or EventType.CREATE
    stamp = format_timestamp(bag.clock(), bag.timestamp_format)
    return replace(bag, timestamps={**bag.timestamps, event_type.time_key: stamp})


enrich_model = compose(add_id, add_model_name, add_timestamp)

enrich_event = compose(add_id, add_event_name, add_timestamp)


def freeze_model(bag: AttributeBag) -> Model:
    return Model(
        id=bag.id,
        model_name=bag.model_name,
        timestamps=bag.timestamps,
        payload=bag.payload,
    )


def freeze_event(bag: AttributeBag) -> Event:
    return Event(
        id=bag.id,
        event_name=bag.event_name,
        event_type=bag.event_type,
        model_name=bag.model_name,
        timestamps=bag.timestamps,
        payload=bag.payload,
    )
