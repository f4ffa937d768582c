"""Product API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, status

from ...core.exceptions import NotFound
from ...repository import ProductRepository
from ...schemas.product import ProductRequest, ProductResponse
from ...utils.logging import get_store_logger
from ..dependencies import CorrelationIdDep, EntityIdPath, ProductRepositoryDep

logger = get_store_logger("store_service.api.products")
router = APIRouter(prefix="/products")


async def _require_product(repository: ProductRepository, product_id: int) -> None:
    if await repository.get_by_id(product_id) is None:
        raise NotFound("Product", product_id)


@router.get("", response_model=List[ProductResponse])
async def list_products(repository: ProductRepository = ProductRepositoryDep):
    """Get all products"""
    return await repository.list_all()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: EntityIdPath,
    repository: ProductRepository = ProductRepositoryDep,
):
    """Get product details by ID"""
    product = await repository.get_by_id(product_id)
    if product is None:
        raise NotFound("Product", product_id)
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductRequest,
    correlation_id: Optional[str] = CorrelationIdDep,
    repository: ProductRepository = ProductRepositoryDep,
):
    """Create a new product"""
    product = await repository.create(name=product_data.name, price=product_data.price)
    logger.info(
        "Product created via API",
        extra={"product_id": product.id, "correlation_id": correlation_id},
    )
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: EntityIdPath,
    product_data: ProductRequest,
    repository: ProductRepository = ProductRepositoryDep,
):
    """Replace a product"""
    await _require_product(repository, product_id)
    return await repository.update(
        product_id, name=product_data.name, price=product_data.price
    )


@router.delete("/{product_id}", response_model=int)
async def delete_product(
    product_id: EntityIdPath,
    repository: ProductRepository = ProductRepositoryDep,
):
    """Delete a product, returning the number of rows removed"""
    await _require_product(repository, product_id)
    return await repository.delete(product_id)
