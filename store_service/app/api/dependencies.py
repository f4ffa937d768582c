"""
FastAPI dependency injection for Store Service

Provides database sessions, repositories, the authenticated caller and
correlation ID lookup for the API routers.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db_session
from ..middleware.auth import authenticated_user
from ..repository import OrderItemRepository, OrderRepository, ProductRepository
from ..schemas.base import INT32_MAX, INT32_MIN

# =====================================================
# DATABASE DEPENDENCIES
# =====================================================


async def get_async_session(
    request: Request,
) -> AsyncGenerator[AsyncSession, None]:
    """Provide async database session"""
    async for session in get_db_session(request):
        yield session


# =====================================================
# REPOSITORY DEPENDENCIES
# =====================================================


def get_product_repository(
    session: AsyncSession = Depends(get_async_session),
) -> ProductRepository:
    return ProductRepository(session)


def get_order_repository(
    session: AsyncSession = Depends(get_async_session),
) -> OrderRepository:
    return OrderRepository(session)


def get_order_item_repository(
    session: AsyncSession = Depends(get_async_session),
) -> OrderItemRepository:
    return OrderItemRepository(session)


# =====================================================
# AUTHENTICATION & REQUEST CONTEXT DEPENDENCIES
# =====================================================


def get_correlation_id(request: Request) -> Optional[str]:
    """Extract correlation ID from request headers or state"""
    correlation_id = request.headers.get("X-Correlation-ID") or request.headers.get(
        "x-request-id"
    )

    # Fallback to request state (from middleware)
    if not correlation_id:
        correlation_id = getattr(request.state, "correlation_id", None)

    return correlation_id


# =====================================================
# COMMON DEPENDENCY ALIASES
# =====================================================

CorrelationIdDep = Depends(get_correlation_id)
CurrentUsernameDep = Depends(authenticated_user)

ProductRepositoryDep = Depends(get_product_repository)
OrderRepositoryDep = Depends(get_order_repository)
OrderItemRepositoryDep = Depends(get_order_item_repository)

# Path ids outside the INTEGER column range are rejected as bad requests
EntityIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]
