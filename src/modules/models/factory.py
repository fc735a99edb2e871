"""Factory registry for models and model events.

``ModelFactory`` owns two mappings:

- model constructors keyed by canonical model name
  (first registration wins);
- event constructors keyed by ``EventType`` and then canonical model
  name (last registration wins).

The application's composition root creates one instance during wiring
and injects it wherever models or events are built.  Registration is
expected to finish before any creation traffic starts; the registry is
not locked.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Union

import structlog
import uuid6

from config import settings
from modules.models.enrichment import (
    AttributeBag,
    enrich_event,
    enrich_model,
    freeze_event,
    freeze_model,
    utc_now,
)
from modules.models.records import Event, Model
from shared.domain.events import EventType, check_model_name, create_event_name
from shared.domain.exceptions import (
    InvalidConstructorResult,
    UnregisteredModel,
    UnregisteredModelEvent,
)

logger = structlog.get_logger(__name__)


class Constructor(Protocol):
    """Builds the attribute bag of a model or event from caller input."""

    def __call__(
        self, args: Any
    ) -> Union[Awaitable[Mapping[str, Any]], Mapping[str, Any]]: ...


def generate_uuid() -> str:
    return str(uuid6.uuid7())


async def _construct(constructor: Constructor, args: Any) -> Mapping[str, Any]:
    result = constructor(args)
    if inspect.isawaitable(result):
        result = await result
    if isinstance(result, (Model, Event)):
        return result.to_dict()
    if not isinstance(result, Mapping):
        raise InvalidConstructorResult(
            f"Constructor returned {type(result).__name__}, expected a mapping."
        )
    return dict(result)


class ModelFactory:
    """Registry of model and event constructors plus the assembly operations."""

    get_event_name = staticmethod(create_event_name)

    def __init__(
        self,
        generate_id: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        timestamp_format: Optional[str] = None,
    ) -> None:
        self._generate_id = generate_id or generate_uuid
        self._clock = clock or utc_now
        self._timestamp_format = timestamp_format or settings.TIMESTAMP_FORMAT
        self._model_factories: Dict[str, Constructor] = {}
        self._event_factories: Dict[EventType, Dict[str, Constructor]] = {
            event_type: {} for event_type in EventType
        }

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_model(self, model_name: str, constructor: Constructor) -> None:
        """Register the constructor for ``model_name``.

        A name that already has a constructor keeps it; the call is a no-op.
        """
        model_name = check_model_name(model_name)

        if model_name in self._model_factories:
            logger.debug("registry.model_already_registered", model_name=model_name)
            return
        if not callable(constructor):
            logger.warning("registry.model_constructor_ignored", model_name=model_name)
            return

        self._model_factories[model_name] = constructor
        logger.info("registry.model_registered", model_name=model_name)

    def register_event(
        self, event_type: Any, model_name: str, constructor: Constructor
    ) -> None:
        """Register (or replace) the constructor for an event of ``model_name``."""
        model_name = check_model_name(model_name)
        event_type = EventType.parse(event_type)

        if not callable(constructor):
            logger.warning(
                "registry.event_constructor_ignored",
                event_type=event_type.value,
                model_name=model_name,
            )
            return

        self._event_factories[event_type][model_name] = constructor
        logger.info(
            "registry.event_registered",
            event_type=event_type.value,
            model_name=model_name,
        )

    def list_models(self) -> List[Constructor]:
        return list(self._model_factories.values())

    def has_model(self, model_name: str) -> bool:
        return check_model_name(model_name) in self._model_factories

    def has_event(self, event_type: Any, model_name: str) -> bool:
        model_name = check_model_name(model_name)
        return model_name in self._event_factories[EventType.parse(event_type)]

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    async def create_model(self, model_name: str, args: Any) -> Model:
        """Call the constructor registered for ``model_name`` and enrich the result.

        Raises:
            InvalidArgument: ``model_name`` is not a non-empty string.
            UnregisteredModel: nothing is registered under ``model_name``.
        """
        model_name = check_model_name(model_name)

        constructor = self._model_factories.get(model_name)
        if constructor is None:
            raise UnregisteredModel(f"unregistered model: {model_name}")

        payload = await _construct(constructor, args)
        model = freeze_model(enrich_model(self._bag(payload, model_name)))

        logger.debug("model.assembled", model_name=model_name, model_id=model.id)
        return model

    async def create_event(self, event_type: Any, model_name: str, args: Any) -> Event:
        """Call the constructor registered for ``(event_type, model_name)``.

        Raises:
            InvalidArgument: bad ``event_type`` or ``model_name``.
            UnregisteredModelEvent: no constructor for that exact pair.
        """
        model_name = check_model_name(model_name)
        event_type = EventType.parse(event_type)

        constructor = self._event_factories[event_type].get(model_name)
        if constructor is None:
            raise UnregisteredModelEvent(
                f"unregistered model event: {event_type.value} {model_name}"
            )

        payload = await _construct(constructor, args)
        event = freeze_event(
            enrich_event(self._bag(payload, model_name, event_type=event_type))
        )

        logger.debug(
            "model_event.assembled",
            event_name=event.event_name,
            event_id=event.id,
        )
        return event

    def _bag(
        self,
        payload: Mapping[str, Any],
        model_name: str,
        event_type: Optional[EventType] = None,
    ) -> AttributeBag:
        return AttributeBag(
            payload=payload,
            model_name=model_name,
            generate_id=self._generate_id,
            clock=self._clock,
            timestamp_format=self._timestamp_format,
            event_type=event_type,
        )
