"""Order API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from ...core.exceptions import NotFound
from ...repository import OrderRepository
from ...schemas.order import OrderCreateRequest, OrderResponse, OrderUpdateRequest
from ...utils.logging import get_store_logger
from ..dependencies import (
    CorrelationIdDep,
    CurrentUsernameDep,
    EntityIdPath,
    OrderRepositoryDep,
)

logger = get_store_logger("store_service.api.orders")
router = APIRouter(prefix="/orders")


async def _require_order(repository: OrderRepository, order_id: int) -> None:
    if await repository.get_by_id(order_id) is None:
        raise NotFound("Order", order_id)


@router.get("", response_model=List[OrderResponse])
async def list_orders(
    username: Optional[str] = Query(None, description="Only orders of this user"),
    repository: OrderRepository = OrderRepositoryDep,
):
    """List all orders, or those of one username"""
    if username is not None:
        return await repository.list_by_username(username)
    return await repository.list_all()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: EntityIdPath,
    repository: OrderRepository = OrderRepositoryDep,
):
    """Get order by ID"""
    order = await repository.get_by_id(order_id)
    if order is None:
        raise NotFound("Order", order_id)
    return order


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreateRequest,
    correlation_id: Optional[str] = CorrelationIdDep,
    username: str = CurrentUsernameDep,
    repository: OrderRepository = OrderRepositoryDep,
):
    """Create a new order owned by the authenticated caller"""
    if order_data.username is not None and order_data.username != username:
        logger.warning(
            "Ignoring client-supplied order username",
            extra={
                "requested_username": order_data.username,
                "username": username,
                "correlation_id": correlation_id,
            },
        )
    return await repository.create(username=username)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: EntityIdPath,
    order_data: OrderUpdateRequest,
    repository: OrderRepository = OrderRepositoryDep,
):
    """Replace an order"""
    await _require_order(repository, order_id)
    return await repository.update(order_id, username=order_data.username)


@router.delete("/{order_id}", response_model=int)
async def delete_order(
    order_id: EntityIdPath,
    repository: OrderRepository = OrderRepositoryDep,
):
    """Delete an order, returning the number of rows removed"""
    await _require_order(repository, order_id)
    return await repository.delete(order_id)
