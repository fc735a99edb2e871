"""Order DTOs.

Framework-agnostic data transfer objects using Pydantic v2.  The order
constructor validates caller input through ``CreateOrderDTO`` before the
payload enters the enrichment pipeline.  DTOs are immutable
(``frozen=True``).

- ``OrderItemDTO``: a single order line.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``UpdateOrderDTO``: input for an order update event.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class OrderItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int
    unit_price: Decimal

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation input.

    Validates:
    - ``total`` is not negative.
    - when items are given, ``total`` matches their sum.
    """

    model_config = ConfigDict(frozen=True)

    total: Decimal
    items: List[OrderItemDTO] = []
    notes: Optional[str] = ""

    @field_validator("total")
    @classmethod
    def total_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Order total cannot be negative.")
        return v

    @model_validator(mode="after")
    def total_matches_items(self):
        if self.items:
            expected = sum(item.unit_price * item.quantity for item in self.items)
            if expected != self.total:
                raise ValueError(f"Order total {self.total} does not match items ({expected}).")
        return self


class UpdateOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    total: Optional[Decimal] = None
    notes: Optional[str] = None
