"""Order repository for database operations"""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CreationFailure, UpdateFailure
from ..models.order import Order
from ..utils.logging import get_store_logger

logger = get_store_logger("store_service.repository.orders")


class OrderRepository:
    """Repository for order database operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Order]:
        """Get all orders"""
        result = await self.session.execute(select(Order))
        return list(result.scalars().all())

    async def list_by_username(self, username: str) -> List[Order]:
        """Get orders placed by the given username"""
        query = select(Order).where(Order.username == username)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        query = (
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, username: str) -> Order:
        """Create a new order for a username"""
        order = Order(username=username)
        self.session.add(order)
        await self.session.flush()  # Get the order ID
        order_id = order.id
        await self.session.commit()

        created = await self.get_by_id(order_id)
        if created is None:
            raise CreationFailure("Failed to create order.", entity="Order")

        logger.info(
            "Order created",
            extra={
                "operation": "create",
                "entity": "order",
                "id": order_id,
                "username": username,
            },
        )
        return created

    async def update(self, order_id: int, username: str) -> Order:
        """Update order with a full replacement of its fields"""
        stmt = (
            update(Order)
            .where(Order.id == order_id)
            .values(username=username)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            raise UpdateFailure(
                "Zero rows affected, expected at least one.", entity="Order"
            )

        updated = await self.get_by_id(order_id)
        if updated is None:
            raise UpdateFailure("Failed to re-read updated order.", entity="Order")

        logger.info(
            "Order updated",
            extra={"operation": "update", "entity": "order", "id": order_id},
        )
        return updated

    async def delete(self, order_id: int) -> int:
        """Delete order by ID and return the number of rows removed"""
        stmt = (
            delete(Order)
            .where(Order.id == order_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        logger.info(
            "Order deleted",
            extra={
                "operation": "delete",
                "entity": "order",
                "id": order_id,
                "rows_affected": result.rowcount,
            },
        )
        return result.rowcount
