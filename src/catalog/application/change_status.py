"""Application service: Activate / Deactivate Product use cases.

Both transitions are idempotent on the aggregate, so re-activating an
active product simply stamps ``updated_at`` again.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class ActivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        product.activate()
        return product_to_dto(self._product_repo.update(product))


class DeactivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        product.deactivate()
        return product_to_dto(self._product_repo.update(product))
