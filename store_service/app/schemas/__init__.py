"""
Pydantic schemas for Store Service request and response bodies.
"""

from .order import (
    OrderCreateRequest,
    OrderItemRequest,
    OrderItemResponse,
    OrderResponse,
    OrderUpdateRequest,
)
from .product import ProductRequest, ProductResponse

__all__ = [
    "ProductRequest",
    "ProductResponse",
    "OrderCreateRequest",
    "OrderUpdateRequest",
    "OrderResponse",
    "OrderItemRequest",
    "OrderItemResponse",
]
