"""Product aggregate.

A product is the only aggregate in the catalog. Its fields are private and
only reachable through read-only properties; every state change goes
through a named domain operation that re-checks the invariants:

- name and description are non-empty after trimming
- the price amount is strictly positive
- the stock quantity is never negative
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from catalog.domain.exceptions import InsufficientStockError, ValidationError
from catalog.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product:
    """Aggregate root for catalog products.

    The identity is ``None`` until a repository stores the product and
    calls ``assign_id``.
    """

    def __init__(
        self,
        name: str,
        description: str,
        price: Money,
        stock_quantity: int,
    ) -> None:
        name, description = self._validate_details(name, description, price)
        self._validate_quantity(stock_quantity, "Stock quantity")
        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        self._id: int | None = None
        self._name = name
        self._description = description
        self._price = price
        self._stock_quantity = stock_quantity
        self._is_active = True
        self._created_at = _utcnow()
        self._updated_at: datetime | None = None

    @classmethod
    def restore(
        cls,
        id: int,
        name: str,
        description: str,
        price: Money,
        stock_quantity: int,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> Product:
        """Rebuild a persisted product exactly as it was stored.

        Skips the constructor so timestamps and the active flag survive a
        round trip through storage.
        """
        product = cls.__new__(cls)
        product._id = id
        product._name = name
        product._description = description
        product._price = price
        product._stock_quantity = stock_quantity
        product._is_active = is_active
        product._created_at = created_at
        product._updated_at = updated_at
        return product

    # --- Read-only state ------------------------------------------------------

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Money:
        return self._price

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    # --- Identity -------------------------------------------------------------

    def assign_id(self, product_id: int) -> None:
        """Give the product its repository identity. Allowed exactly once."""
        if self._id is not None:
            raise ValidationError(
                f"Product already has ID {self._id}; cannot reassign to {product_id}"
            )
        self._id = product_id

    # --- Domain operations ----------------------------------------------------

    def update_details(self, name: str, description: str, price: Money) -> None:
        """Replace name, description and price together.

        Stock and the active flag are untouched.
        """
        name, description = self._validate_details(name, description, price)
        self._name = name
        self._description = description
        self._price = price
        self._touch()

    def update_stock(self, new_quantity: int) -> None:
        """Set the stock level outright (not a delta)."""
        self._validate_quantity(new_quantity, "Stock quantity")
        if new_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self._stock_quantity = new_quantity
        self._touch()

    def decrease_stock(self, quantity: int) -> None:
        self._validate_quantity(quantity, "Quantity to decrease")
        if quantity <= 0:
            raise ValidationError("Quantity to decrease must be positive")
        if quantity > self._stock_quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self._name} "
                f"(available {self._stock_quantity}, requested {quantity})"
            )
        self._stock_quantity -= quantity
        self._touch()

    def increase_stock(self, quantity: int) -> None:
        self._validate_quantity(quantity, "Quantity to increase")
        if quantity <= 0:
            raise ValidationError("Quantity to increase must be positive")
        self._stock_quantity += quantity
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    # --- Queries --------------------------------------------------------------

    def is_in_stock(self) -> bool:
        return self._is_active and self._stock_quantity > 0

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        """Active, has stock, but no more than ``threshold`` units."""
        return self._is_active and 0 < self._stock_quantity <= threshold

    def is_out_of_stock(self) -> bool:
        # Deliberately ignores the active flag.
        return self._stock_quantity == 0

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    @staticmethod
    def _validate_details(
        name: str, description: str, price: Money
    ) -> tuple[str, str]:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name cannot be empty")
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Product description cannot be empty")
        if not isinstance(price, Money):
            raise ValidationError("Product price is required")
        if price.amount <= Decimal("0"):
            raise ValidationError("Product price must be greater than zero")
        return name.strip(), description.strip()

    @staticmethod
    def _validate_quantity(value: int, label: str) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"{label} must be an integer, got {type(value).__name__}"
            )

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"price={str(self._price)!r}, stock_quantity={self._stock_quantity!r}, "
            f"is_active={self._is_active!r})"
        )
