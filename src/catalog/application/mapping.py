"""Conversions between the Product aggregate and its DTOs."""

from __future__ import annotations

from catalog.application.dto import MoneyDTO, ProductDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money


def product_to_dto(product: Product) -> ProductDTO:
    if product.id is None:
        raise ValidationError("Product has not been stored yet and has no ID")
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=MoneyDTO(amount=product.price.amount, currency=product.price.currency),
        stock_quantity=product.stock_quantity,
        is_active=product.is_active,
        created_at=product.created_at,
        updated_at=product.updated_at,
        is_in_stock=product.is_in_stock(),
        is_low_stock=product.is_low_stock(),
        is_out_of_stock=product.is_out_of_stock(),
    )


def money_from_dto(dto: MoneyDTO | None) -> Money:
    if dto is None:
        raise ValidationError("Price is required")
    return Money.of(dto.amount, dto.currency)
