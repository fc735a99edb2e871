"""Event constructors for the Orders bounded context."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from modules.models.records import Model
from modules.orders.dtos import UpdateOrderDTO


async def order_created(model: Model) -> Dict[str, Any]:
    """Payload of ``CREATEORDER``: a snapshot of the new order."""
    return {
        "model_id": model.id,
        "total": model.total,
        "notes": model.notes,
    }


async def order_updated(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Payload of ``UPDATEORDER``: the changed fields only."""
    dto = UpdateOrderDTO.model_validate(changes)
    return {
        "model_id": dto.id,
        "changes": dto.model_dump(exclude={"id"}, exclude_none=True),
    }


async def order_deleted(model: Model) -> Dict[str, Any]:
    return {"model_id": model.id}
