"""Product repository for database operations"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CreationFailure, UpdateFailure
from ..models.product import Product
from ..utils.logging import get_store_logger

logger = get_store_logger("store_service.repository.products")


class ProductRepository:
    """Repository for product database operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Product]:
        """Get all products in store order"""
        result = await self.session.execute(select(Product))
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID, or None when no row matches"""
        query = (
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, name: str, price: Decimal) -> Product:
        """Insert a product and return the row as stored"""
        product = Product(name=name, price=price)
        self.session.add(product)
        await self.session.flush()  # Get the product ID
        product_id = product.id
        await self.session.commit()

        created = await self.get_by_id(product_id)
        if created is None:
            raise CreationFailure("Failed to create product.", entity="Product")

        logger.info(
            "Product created",
            extra={"operation": "create", "entity": "product", "id": product_id},
        )
        return created

    async def update(self, product_id: int, name: str, price: Decimal) -> Product:
        """Replace every field of a product"""
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(name=name, price=price)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            raise UpdateFailure(
                "Zero rows affected, expected at least one.", entity="Product"
            )

        updated = await self.get_by_id(product_id)
        if updated is None:
            raise UpdateFailure("Failed to re-read updated product.", entity="Product")

        logger.info(
            "Product updated",
            extra={"operation": "update", "entity": "product", "id": product_id},
        )
        return updated

    async def delete(self, product_id: int) -> int:
        """Delete product by ID and return the number of rows removed"""
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        logger.info(
            "Product deleted",
            extra={
                "operation": "delete",
                "entity": "product",
                "id": product_id,
                "rows_affected": result.rowcount,
            },
        )
        return result.rowcount
