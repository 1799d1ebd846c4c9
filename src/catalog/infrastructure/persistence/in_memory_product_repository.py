"""In-memory implementation of ProductRepository.

Products are kept in a dict keyed by ID. Copies go in and out so a caller
mutating a loaded aggregate does not change the stored one until it calls
``update``.
"""

from __future__ import annotations

import copy
import threading
from typing import Callable

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._store.get(product_id)
            return copy.deepcopy(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return self._select(lambda p: True)

    def list_active(self) -> list[Product]:
        return self._select(lambda p: p.is_active)

    def list_low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        return self._select(lambda p: p.is_active and p.stock_quantity <= threshold)

    def search_by_name(self, term: str) -> list[Product]:
        needle = term.lower()
        return self._select(lambda p: p.is_active and needle in p.name.lower())

    def add(self, product: Product) -> Product:
        with self._lock:
            product.assign_id(self._next_id)
            self._next_id += 1
            self._store[product.id] = copy.deepcopy(product)
        logger.debug("product_stored", product_id=product.id)
        return product

    def update(self, product: Product) -> Product:
        with self._lock:
            if product.id not in self._store:
                raise EntityNotFoundError(f"Product with ID {product.id} not found")
            self._store[product.id] = copy.deepcopy(product)
        logger.debug("product_replaced", product_id=product.id)
        return product

    def delete(self, product_id: int) -> None:
        with self._lock:
            removed = self._store.pop(product_id, None)
        if removed is not None:
            logger.debug("product_removed", product_id=product_id)

    def exists(self, product_id: int) -> bool:
        with self._lock:
            return product_id in self._store

    # --- Internal helpers -----------------------------------------------------

    def _select(self, predicate: Callable[[Product], bool]) -> list[Product]:
        with self._lock:
            return [copy.deepcopy(p) for p in self._store.values() if predicate(p)]
