"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class MoneyDTO:
    amount: Decimal | str | int | float
    currency: str = "USD"


@dataclass(frozen=True)
class CreateProductDTO:
    """Input: a new catalog entry."""

    name: str
    description: str
    price: MoneyDTO
    stock_quantity: int = 0


@dataclass(frozen=True)
class UpdateProductDTO:
    """Input: replacement details for an existing product."""

    name: str
    description: str
    price: MoneyDTO


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown to callers.

    The three stock flags are computed from the aggregate at mapping time.
    """

    id: int
    name: str
    description: str
    price: MoneyDTO
    stock_quantity: int
    is_active: bool
    created_at: datetime
    updated_at: datetime | None
    is_in_stock: bool
    is_low_stock: bool
    is_out_of_stock: bool
