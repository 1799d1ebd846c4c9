"""Application service: Create Product use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import CreateProductDTO, ProductDTO
from catalog.application.mapping import money_from_dto, product_to_dto
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, dto: CreateProductDTO) -> ProductDTO:
        """Add a new product to the catalog.

        The Product constructor enforces every invariant; the repository
        assigns the ID.
        """
        product = Product(
            name=dto.name,
            description=dto.description,
            price=money_from_dto(dto.price),
            stock_quantity=dto.stock_quantity,
        )
        saved = self._product_repo.add(product)
        logger.info("product_created", product_id=saved.id, name=saved.name)
        return product_to_dto(saved)
