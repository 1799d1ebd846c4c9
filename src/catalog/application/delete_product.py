"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        # The repository's delete is a silent no-op; the use case is not.
        if not self._product_repo.exists(product_id):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        self._product_repo.delete(product_id)
        logger.info("product_deleted", product_id=product_id)
