"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, UpdateProductDTO
from catalog.application.mapping import money_from_dto, product_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, dto: UpdateProductDTO) -> ProductDTO:
        """Replace a product's name, description and price."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        product.update_details(dto.name, dto.description, money_from_dto(dto.price))
        return product_to_dto(self._product_repo.update(product))
