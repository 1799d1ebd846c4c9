"""Application service: stock level use cases.

``UpdateStockHandler`` sets the level outright (a stock count);
the increase/decrease handlers apply a delta (goods received or shipped).
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class _StockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def _load(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product

    def _save(self, product: Product) -> ProductDTO:
        return product_to_dto(self._product_repo.update(product))


class UpdateStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        product = self._load(product_id)
        product.update_stock(quantity)
        return self._save(product)


class IncreaseStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        product = self._load(product_id)
        product.increase_stock(quantity)
        return self._save(product)


class DecreaseStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        """Withdraw units; raises InsufficientStockError if too few are on hand."""
        product = self._load(product_id)
        product.decrease_stock(quantity)
        return self._save(product)
