"""Order model constructor.

Registered under ``ORDER``; the registry adds ``id``, ``model_name`` and
``create_time`` on top of the payload built here.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from modules.orders.dtos import CreateOrderDTO


async def build_order(args: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate creation input and return the order payload.

    Raises:
        pydantic.ValidationError: the input is not a valid order.
    """
    dto = CreateOrderDTO.model_validate(args)
    return {
        "total": dto.total,
        "items": tuple(item.model_dump() for item in dto.items),
        "notes": dto.notes or "",
    }
