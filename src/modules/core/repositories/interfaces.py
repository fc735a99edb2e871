"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class the use cases
persist through.  Service-layer code depends on this abstraction,
never on a concrete storage engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the record managed by the
    repository (e.g. ``Model``).  ``save`` must be idempotent for an
    identical ``(id, entity)`` pair.
    """

    @abstractmethod
    async def save(self, id: str, entity: T) -> None:
        """Persist (create or replace) an entity under ``id``."""

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its identifier."""

    @abstractmethod
    async def list(self) -> List[T]:
        """List every stored entity in insertion order."""

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Remove an entity by id; ``False`` when nothing was stored."""
