"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryProductRepository()
    return JsonProductRepository(settings.products_file)
