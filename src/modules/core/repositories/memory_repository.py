"""In-memory implementation of ``IRepository``."""

from __future__ import annotations

from typing import Dict, List, Optional

import structlog

from modules.core.repositories.interfaces import IRepository
from modules.models.records import Model

logger = structlog.get_logger(__name__)


class InMemoryModelRepository(IRepository[Model]):
    """Dict-backed store for models, keyed by model id."""

    def __init__(self) -> None:
        self._store: Dict[str, Model] = {}

    async def save(self, id: str, entity: Model) -> None:
        self._store[id] = entity
        logger.debug("repository.saved", model_id=id, model_name=entity.model_name)

    async def get_by_id(self, id: str) -> Optional[Model]:
        return self._store.get(id)

    async def list(self) -> List[Model]:
        return list(self._store.values())

    async def delete(self, id: str) -> bool:
        removed = self._store.pop(id, None)
        return removed is not None
