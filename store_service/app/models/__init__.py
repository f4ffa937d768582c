"""
Store Service Models

This module contains all database models for the Store Service.
All models inherit from StoreServiceBaseModel which provides the primary key.
"""

from .base import StoreServiceBase, StoreServiceBaseModel
from .order import Order, OrderItem
from .product import Product

__all__ = [
    # Base classes
    "StoreServiceBase",
    "StoreServiceBaseModel",
    # Store models
    "Product",
    "Order",
    "OrderItem",
]
