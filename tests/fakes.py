"""Test doubles for the ProductRepository interface.

The in-memory adapter covers the happy paths; the doubles here exercise
what the adapters never do on their own (failing storage, call spying).
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


class SpyProductRepository(InMemoryProductRepository):
    """Records which repository methods were called."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def search_by_name(self, term: str) -> list[Product]:
        self.calls.append("search_by_name")
        return super().search_by_name(term)

    def update(self, product: Product) -> Product:
        self.calls.append("update")
        return super().update(product)

    def delete(self, product_id: int) -> None:
        self.calls.append("delete")
        super().delete(product_id)


class BrokenProductRepository(InMemoryProductRepository):
    """Fails every read the way a lost database connection would."""

    def list_all(self) -> list[Product]:
        raise RuntimeError("connection reset by peer")

    def get_by_id(self, product_id: int) -> Product | None:
        raise RuntimeError("connection reset by peer")
