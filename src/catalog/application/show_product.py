"""Application service: Show Product use case (query).

Absence is reported as ``None`` rather than an exception; the caller
decides whether a missing product is an error.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO | None:
        product = self._product_repo.get_by_id(product_id)
        return product_to_dto(product) if product is not None else None
