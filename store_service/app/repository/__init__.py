"""Repository layer for Store Service"""

from .order_item_repository import OrderItemRepository
from .order_repository import OrderRepository
from .product_repository import ProductRepository

__all__ = [
    "ProductRepository",
    "OrderRepository",
    "OrderItemRepository",
]
