"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON, SQL)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return only the active products."""

    @abstractmethod
    def list_low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        """Return active products with at most ``threshold`` units.

        Unlike ``Product.is_low_stock`` this includes products with zero
        units on hand.
        """

    @abstractmethod
    def search_by_name(self, term: str) -> list[Product]:
        """Return active products whose name contains ``term`` (any case)."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Assign a fresh ID to a new product and store it.

        IDs start at 1 and are never reused, even after deletion.
        """

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Replace the stored product sharing ``product.id``.

        Raises EntityNotFoundError if nothing is stored under that ID.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Deleting an unknown ID is a no-op."""

    @abstractmethod
    def exists(self, product_id: int) -> bool:
        """Return True if a product is stored under ``product_id``."""
