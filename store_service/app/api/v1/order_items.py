"""Order item API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from ...core.exceptions import NotFound
from ...repository import OrderItemRepository
from ...schemas.base import INT32_MAX, INT32_MIN
from ...schemas.order import OrderItemRequest, OrderItemResponse
from ..dependencies import EntityIdPath, OrderItemRepositoryDep

router = APIRouter(prefix="/order-items")


async def _require_order_item(repository: OrderItemRepository, item_id: int) -> None:
    if await repository.get_by_id(item_id) is None:
        raise NotFound("Order item", item_id)


@router.get("", response_model=List[OrderItemResponse])
async def list_order_items(
    order_id: Optional[int] = Query(
        None, alias="orderId", ge=INT32_MIN, le=INT32_MAX
    ),
    repository: OrderItemRepository = OrderItemRepositoryDep,
):
    """List all order items, or the items of one order"""
    if order_id is not None:
        return await repository.list_by_order_id(order_id)
    return await repository.list_all()


@router.get("/{item_id}", response_model=OrderItemResponse)
async def get_order_item(
    item_id: EntityIdPath,
    repository: OrderItemRepository = OrderItemRepositoryDep,
):
    """Get order item by ID"""
    item = await repository.get_by_id(item_id)
    if item is None:
        raise NotFound("Order item", item_id)
    return item


@router.post(
    "", response_model=OrderItemResponse, status_code=status.HTTP_201_CREATED
)
async def create_order_item(
    item_data: OrderItemRequest,
    repository: OrderItemRepository = OrderItemRepositoryDep,
):
    """Add an item to an order"""
    return await repository.create(
        order_id=item_data.order_id,
        product_id=item_data.product_id,
        quantity=item_data.quantity,
    )


@router.put("/{item_id}", response_model=OrderItemResponse)
async def update_order_item(
    item_id: EntityIdPath,
    item_data: OrderItemRequest,
    repository: OrderItemRepository = OrderItemRepositoryDep,
):
    """Replace an order item"""
    await _require_order_item(repository, item_id)
    return await repository.update(
        item_id,
        order_id=item_data.order_id,
        product_id=item_data.product_id,
        quantity=item_data.quantity,
    )


@router.delete("/{item_id}", response_model=int)
async def delete_order_item(
    item_id: EntityIdPath,
    repository: OrderItemRepository = OrderItemRepositoryDep,
):
    """Delete an order item, returning the number of rows removed"""
    await _require_order_item(repository, item_id)
    return await repository.delete(item_id)
