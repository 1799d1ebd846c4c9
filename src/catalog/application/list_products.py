"""Application service: catalog listing and search use cases (queries)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]


class ListActiveProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_active()]


class ListLowStockProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> list[ProductDTO]:
        """Active products at or below ``threshold`` units, sold-out ones included."""
        return [
            product_to_dto(p) for p in self._product_repo.list_low_stock(threshold)
        ]


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.search_by_name(term)]
