from decimal import Decimal

from pydantic import Field, field_serializer, field_validator

from .base import StoreSchema


class ProductRequest(StoreSchema):
    """Body for creating or replacing a product. Any ``id`` is ignored."""

    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., max_digits=10, decimal_places=2)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace only")
        return v


class ProductResponse(StoreSchema):
    id: int
    name: str
    price: Decimal

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
