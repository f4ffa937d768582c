"""
Authentication middleware for Store Service.
"""

from .auth_middleware import (
    AuthenticatedUser,
    StoreServiceAuthMiddleware,
    authenticated_user,
    setup_store_auth_middleware,
)

__all__ = [
    "StoreServiceAuthMiddleware",
    "AuthenticatedUser",
    "setup_store_auth_middleware",
    "authenticated_user",
]
