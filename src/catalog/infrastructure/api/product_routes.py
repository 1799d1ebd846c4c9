"""HTTP routes for the Product aggregate.

Each route builds the matching use-case handler and converts its DTO into a
response model. Domain exceptions are left to the handlers registered in
``catalog.infrastructure.api.app``.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import CreateProductDTO, UpdateProductDTO
from catalog.application.list_products import (
    ListActiveProductsHandler,
    ListLowStockProductsHandler,
    ListProductsHandler,
    SearchProductsHandler,
)
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.application.update_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    UpdateStockHandler,
)
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.dependencies import get_product_repository
from catalog.infrastructure.api.schemas import (
    CreateProductRequest,
    ErrorResponse,
    ProductResponse,
    StockQuantityRequest,
    UpdateProductRequest,
)

router = APIRouter(prefix="/products", tags=["Products"])

_COMMAND_ERRORS = {
    400: {"description": "Invalid input or unknown product", "model": ErrorResponse},
    500: {"description": "Unexpected error", "model": ErrorResponse},
}


# --- Queries ------------------------------------------------------------------


@router.get("", response_model=List[ProductResponse], summary="List all products")
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    return [ProductResponse.from_dto(dto) for dto in ListProductsHandler(repo).handle()]


@router.get("/active", response_model=List[ProductResponse], summary="List active products")
def list_active_products(repo: ProductRepository = Depends(get_product_repository)):
    dtos = ListActiveProductsHandler(repo).handle()
    return [ProductResponse.from_dto(dto) for dto in dtos]


@router.get(
    "/low-stock",
    response_model=List[ProductResponse],
    summary="List active products at or below a stock threshold",
)
def list_low_stock_products(
    threshold: int = Query(
        default=DEFAULT_LOW_STOCK_THRESHOLD,
        description="Upper bound on units on hand (inclusive)",
    ),
    repo: ProductRepository = Depends(get_product_repository),
):
    dtos = ListLowStockProductsHandler(repo).handle(threshold)
    return [ProductResponse.from_dto(dto) for dto in dtos]


@router.get(
    "/search",
    response_model=List[ProductResponse],
    responses={400: {"description": "Empty search term", "model": ErrorResponse}},
    summary="Search active products by name",
)
def search_products(
    name: str = Query(default="", description="Case-insensitive name fragment"),
    repo: ProductRepository = Depends(get_product_repository),
):
    if not name.strip():
        raise ValidationError("Search term cannot be empty")
    dtos = SearchProductsHandler(repo).handle(name)
    return [ProductResponse.from_dto(dto) for dto in dtos]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Get a product by ID",
)
def get_product(
    product_id: int, repo: ProductRepository = Depends(get_product_repository)
):
    dto = ShowProductHandler(repo).handle(product_id)
    if dto is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "NotFound",
                "message": f"Product with ID {product_id} not found",
            },
        )
    return ProductResponse.from_dto(dto)


# --- Commands -----------------------------------------------------------------


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_COMMAND_ERRORS,
    summary="Create a product",
)
def create_product(
    body: CreateProductRequest,
    response: Response,
    repo: ProductRepository = Depends(get_product_repository),
):
    dto = CreateProductHandler(repo).handle(
        CreateProductDTO(
            name=body.name,
            description=body.description,
            price=body.price.to_dto(),
            stock_quantity=body.stock_quantity,
        )
    )
    response.headers["Location"] = f"{router.prefix}/{dto.id}"
    return ProductResponse.from_dto(dto)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Replace a product's details",
)
def update_product(
    product_id: int,
    body: UpdateProductRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    dto = UpdateProductHandler(repo).handle(
        product_id,
        UpdateProductDTO(
            name=body.name,
            description=body.description,
            price=body.price.to_dto(),
        ),
    )
    return ProductResponse.from_dto(dto)


@router.patch(
    "/{product_id}/stock",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Set the stock level",
)
def update_stock(
    product_id: int,
    body: StockQuantityRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    dto = UpdateStockHandler(repo).handle(product_id, body.quantity)
    return ProductResponse.from_dto(dto)


@router.post(
    "/{product_id}/stock/increase",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Add units to stock",
)
def increase_stock(
    product_id: int,
    body: StockQuantityRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    dto = IncreaseStockHandler(repo).handle(product_id, body.quantity)
    return ProductResponse.from_dto(dto)


@router.post(
    "/{product_id}/stock/decrease",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Withdraw units from stock",
)
def decrease_stock(
    product_id: int,
    body: StockQuantityRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    dto = DecreaseStockHandler(repo).handle(product_id, body.quantity)
    return ProductResponse.from_dto(dto)


@router.post(
    "/{product_id}/activate",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Activate a product",
)
def activate_product(
    product_id: int, repo: ProductRepository = Depends(get_product_repository)
):
    return ProductResponse.from_dto(ActivateProductHandler(repo).handle(product_id))


@router.post(
    "/{product_id}/deactivate",
    response_model=ProductResponse,
    responses=_COMMAND_ERRORS,
    summary="Deactivate a product",
)
def deactivate_product(
    product_id: int, repo: ProductRepository = Depends(get_product_repository)
):
    return ProductResponse.from_dto(DeactivateProductHandler(repo).handle(product_id))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_COMMAND_ERRORS,
    summary="Delete a product",
)
def delete_product(
    product_id: int, repo: ProductRepository = Depends(get_product_repository)
):
    DeleteProductHandler(repo).handle(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
