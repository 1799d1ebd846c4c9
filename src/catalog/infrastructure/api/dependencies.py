"""FastAPI dependencies."""

from fastapi import Request

from catalog.domain.repository.product_repository import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository the application was built with."""
    return request.app.state.product_repository
