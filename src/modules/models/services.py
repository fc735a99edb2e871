"""Model service layer (Use Cases).

``AddModelService`` orchestrates creation of a model together with its
CREATE event, persistence of the model, and notification of listeners.
Steps run strictly in order; the first failure propagates unchanged and
nothing after it runs.  No compensation is attempted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

import structlog

from modules.models.handlers import log_event
from shared.domain.events import EventType, check_model_name, create_event_name

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.models.factory import ModelFactory
    from modules.models.records import Model
    from shared.domain.bus import EventHandler, IObserver

logger = structlog.get_logger(__name__)


class AddModelService:
    """Application service for the add-model use case.

    Receives the registry and collaborators via constructor injection.
    Handlers (plus the default ``log_event``) are subscribed to the CREATE
    event name once, here, not per call.
    """

    event_type = EventType.CREATE

    def __init__(
        self,
        factory: ModelFactory,
        model_name: str,
        repository: IRepository[Model],
        observer: IObserver,
        handlers: Optional[Iterable[EventHandler]] = None,
    ) -> None:
        self._factory = factory
        self._model_name = check_model_name(model_name)
        self._repository = repository
        self._observer = observer
        self.event_name = create_event_name(self.event_type, self._model_name)

        self._handlers: List[EventHandler] = [*(handlers or []), log_event]
        for handler in self._handlers:
            self._observer.on(self.event_name, handler)

    @property
    def model_name(self) -> str:
        return self._model_name

    async def add_model(self, input: Any) -> Model:
        """Create, persist and announce a new model.

        Steps:
        1. Build the model through the registry.
        2. Build the CREATE event from the new model.
        3. Save the model by id.
        4. Notify listeners with the event name and event.

        Raises whatever the first failing step raised.
        """
        log = logger.bind(model_name=self._model_name)
        log.info("model.creation_started")

        model = await self._factory.create_model(self._model_name, input)
        event = await self._factory.create_event(self.event_type, self._model_name, model)

        await self._repository.save(model.id, model)
        log.info("model.saved", model_id=model.id)

        await self._observer.notify(event.get_event_name(), event)
        log.info("model.created", model_id=model.id, event_name=event.event_name)
        return model

    __call__ = add_model


def add_model_factory(
    *,
    factory: ModelFactory,
    model_name: str,
    repository: IRepository[Model],
    observer: IObserver,
    handlers: Optional[Iterable[EventHandler]] = None,
) -> AddModelService:
    """Return a configured ``add_model`` callable for ``model_name``."""
    return AddModelService(
        factory=factory,
        model_name=model_name,
        repository=repository,
        observer=observer,
        handlers=handlers,
    )
