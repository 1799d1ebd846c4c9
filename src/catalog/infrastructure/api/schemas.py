"""Pydantic models for request/response validation.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from catalog.application.dto import MoneyDTO, ProductDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Any amount within these bounds survives the float rendering below unchanged.
MAX_AMOUNT_DIGITS = 15
MAX_AMOUNT_DECIMAL_PLACES = 4


class MoneySchema(CamelModel):
    """Price value; the amount is parsed as Decimal and rendered as a number."""

    amount: Decimal = Field(
        ...,
        max_digits=MAX_AMOUNT_DIGITS,
        decimal_places=MAX_AMOUNT_DECIMAL_PLACES,
        description="Non-negative amount",
        examples=[19.99],
    )
    currency: str = Field(default="USD", description="Currency code", examples=["USD"])

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)

    def to_dto(self) -> MoneyDTO:
        return MoneyDTO(amount=self.amount, currency=self.currency)


class CreateProductRequest(CamelModel):
    """Request model for adding a product to the catalog."""

    name: str = Field(..., description="Product name", examples=["Lamp"])
    description: str = Field(..., description="Product description", examples=["Desk lamp"])
    price: MoneySchema
    stock_quantity: int = Field(default=0, description="Units on hand")


class UpdateProductRequest(CamelModel):
    """Request model for replacing a product's details."""

    name: str
    description: str
    price: MoneySchema


class StockQuantityRequest(CamelModel):
    """Request model for stock changes (absolute level or delta)."""

    quantity: int


class ProductResponse(CamelModel):
    """Response model for a single product."""

    id: int
    name: str
    description: str
    price: MoneySchema
    stock_quantity: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    is_in_stock: bool
    is_low_stock: bool
    is_out_of_stock: bool

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> "ProductResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=MoneySchema.model_construct(
                amount=dto.price.amount, currency=dto.price.currency
            ),
            stock_quantity=dto.stock_quantity,
            is_active=dto.is_active,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
            is_in_stock=dto.is_in_stock,
            is_low_stock=dto.is_low_stock,
            is_out_of_stock=dto.is_out_of_stock,
        )


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Machine-readable error kind", examples=["NotFound"])
    message: str = Field(..., description="Human-readable explanation")


class HealthResponse(BaseModel):
    status: str
    service: str
