from typing import Optional

from pydantic import Field

from .base import StoreInt, StoreSchema


class OrderCreateRequest(StoreSchema):
    """Order body on create. The username is replaced by the caller's identity."""

    username: Optional[str] = Field(None, max_length=255)


class OrderUpdateRequest(StoreSchema):
    username: str = Field(..., min_length=1, max_length=255)


class OrderResponse(StoreSchema):
    id: int
    username: str


class OrderItemRequest(StoreSchema):
    order_id: StoreInt
    product_id: StoreInt
    quantity: StoreInt


class OrderItemResponse(StoreSchema):
    id: int
    order_id: int
    product_id: int
    quantity: int
