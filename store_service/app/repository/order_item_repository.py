"""Order item repository for database operations"""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CreationFailure, UpdateFailure
from ..models.order import OrderItem
from ..utils.logging import get_store_logger

logger = get_store_logger("store_service.repository.order_items")


class OrderItemRepository:
    """Repository for order item database operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[OrderItem]:
        """Get all order items"""
        result = await self.session.execute(select(OrderItem))
        return list(result.scalars().all())

    async def list_by_order_id(self, order_id: int) -> List[OrderItem]:
        """Get all items for an order"""
        query = select(OrderItem).where(OrderItem.order_id == order_id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, item_id: int) -> Optional[OrderItem]:
        """Get order item by ID"""
        query = (
            select(OrderItem)
            .where(OrderItem.id == item_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, order_id: int, product_id: int, quantity: int) -> OrderItem:
        """Create a new order item"""
        item = OrderItem(order_id=order_id, product_id=product_id, quantity=quantity)
        self.session.add(item)
        await self.session.flush()  # Get the order item ID
        item_id = item.id
        await self.session.commit()

        created = await self.get_by_id(item_id)
        if created is None:
            raise CreationFailure("Failed to create order item.", entity="OrderItem")

        logger.info(
            "Order item created",
            extra={
                "operation": "create",
                "entity": "order_item",
                "id": item_id,
                "order_id": order_id,
                "product_id": product_id,
            },
        )
        return created

    async def update(
        self, item_id: int, order_id: int, product_id: int, quantity: int
    ) -> OrderItem:
        """Replace every field of an order item"""
        stmt = (
            update(OrderItem)
            .where(OrderItem.id == item_id)
            .values(order_id=order_id, product_id=product_id, quantity=quantity)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            raise UpdateFailure(
                "Zero rows affected, expected at least one.", entity="OrderItem"
            )

        updated = await self.get_by_id(item_id)
        if updated is None:
            raise UpdateFailure(
                "Failed to re-read updated order item.", entity="OrderItem"
            )

        logger.info(
            "Order item updated",
            extra={"operation": "update", "entity": "order_item", "id": item_id},
        )
        return updated

    async def delete(self, item_id: int) -> int:
        """Delete order item by ID and return the number of rows removed"""
        stmt = (
            delete(OrderItem)
            .where(OrderItem.id == item_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        logger.info(
            "Order item deleted",
            extra={
                "operation": "delete",
                "entity": "order_item",
                "id": item_id,
                "rows_affected": result.rowcount,
            },
        )
        return result.rowcount
