from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from store_service.app.core.exceptions import CreationFailure, UpdateFailure
from store_service.app.repository.product_repository import ProductRepository


class TestProductRepository:
    """Unit tests for ProductRepository against a real SQLite store."""

    @pytest.fixture
    def repository(self, db_session):
        return ProductRepository(db_session)

    @pytest.mark.asyncio
    async def test_create_returns_stored_fields(self, repository):
        product = await repository.create(name="Widget", price=Decimal("9.99"))

        assert product.id is not None
        assert product.name == "Widget"
        assert product.price == Decimal("9.99")

        fetched = await repository.get_by_id(product.id)
        assert fetched is not None
        assert (fetched.id, fetched.name, fetched.price) == (
            product.id,
            "Widget",
            Decimal("9.99"),
        )

    @pytest.mark.asyncio
    async def test_create_assigns_distinct_ids(self, repository):
        first = await repository.create(name="Widget", price=Decimal("1.00"))
        second = await repository.create(name="Gadget", price=Decimal("2.00"))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_get_by_id_absent_returns_none(self, repository):
        assert await repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_create_raises_when_reread_finds_nothing(self, repository):
        with patch.object(repository, "get_by_id", AsyncMock(return_value=None)):
            with pytest.raises(CreationFailure) as exc_info:
                await repository.create(name="Ghost", price=Decimal("1.00"))

        assert exc_info.value.entity == "Product"

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, repository):
        product = await repository.create(name="Widget", price=Decimal("9.99"))

        updated = await repository.update(
            product.id, name="Widget Pro", price=Decimal("19.50")
        )

        assert updated.id == product.id
        assert updated.name == "Widget Pro"
        assert updated.price == Decimal("19.50")

        fetched = await repository.get_by_id(product.id)
        assert fetched.name == "Widget Pro"
        assert fetched.price == Decimal("19.50")

    @pytest.mark.asyncio
    async def test_update_missing_id_raises_update_failure(self, repository):
        with pytest.raises(UpdateFailure) as exc_info:
            await repository.update(999, name="Nothing", price=Decimal("1.00"))

        assert "Zero rows affected" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_update_raises_when_reread_finds_nothing(self, repository):
        product = await repository.create(name="Widget", price=Decimal("9.99"))

        with patch.object(repository, "get_by_id", AsyncMock(return_value=None)):
            with pytest.raises(UpdateFailure) as exc_info:
                await repository.update(
                    product.id, name="Widget Pro", price=Decimal("19.50")
                )

        assert exc_info.value.message == "Failed to re-read updated product."
        assert exc_info.value.entity == "Product"

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, repository):
        product = await repository.create(name="Widget", price=Decimal("9.99"))

        assert await repository.delete(product.id) == 1
        assert await repository.get_by_id(product.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_id_returns_zero(self, repository):
        assert await repository.delete(999) == 0

    @pytest.mark.asyncio
    async def test_list_all_returns_every_product(self, repository):
        assert await repository.list_all() == []

        widget = await repository.create(name="Widget", price=Decimal("9.99"))
        gadget = await repository.create(name="Gadget", price=Decimal("4.25"))

        products = await repository.list_all()
        assert {p.id for p in products} == {widget.id, gadget.id}
