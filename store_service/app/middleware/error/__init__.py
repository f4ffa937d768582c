"""
Error middleware for Store Service.
"""

from .error_handler import StoreServiceErrorHandler, setup_store_error_handling

__all__ = ["StoreServiceErrorHandler", "setup_store_error_handling"]
