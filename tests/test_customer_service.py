"""Tests for CustomerService."""

from __future__ import annotations

import pytest

from script_registry.modules.common.exceptions import ConflictError, NotFoundError, ValidationError
from script_registry.modules.customers import Customer


class TestCreateCustomer:
    @pytest.mark.asyncio
    async def test_create_then_list(self, customer_service):
        created = await customer_service.create_customer("1", "Acme")
        assert created == Customer(id="1", name="Acme")
        assert await customer_service.list_customers() == [Customer(id="1", name="Acme")]

    @pytest.mark.asyncio
    async def test_list_is_sorted_by_name(self, customer_service):
        for customer_id, name in [("3", "Initech"), ("1", "Globex"), ("2", "Acme")]:
            await customer_service.create_customer(customer_id, name)
        names = [customer.name for customer in await customer_service.list_customers()]
        assert names == ["Acme", "Globex", "Initech"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("customer_id,name", [("", "Acme"), ("1", ""), ("  ", "Acme"), ("1", None)])
    async def test_blank_fields_are_rejected(self, customer_service, customer_id, name):
        with pytest.raises(ValidationError):
            await customer_service.create_customer(customer_id, name)
        assert await customer_service.list_customers() == []

    @pytest.mark.asyncio
    async def test_duplicate_id_conflicts(self, customer_service):
        await customer_service.create_customer("1", "Acme")
        with pytest.raises(ConflictError):
            await customer_service.create_customer("1", "Globex")

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, customer_service):
        await customer_service.create_customer("1", "Acme")
        with pytest.raises(ConflictError):
            await customer_service.create_customer("2", "Acme")
        assert len(await customer_service.list_customers()) == 1


class TestGetAndDelete:
    @pytest.mark.asyncio
    async def test_get_customer(self, customer_service, acme):
        assert await customer_service.get_customer("1") == acme
        assert await customer_service.get_customer("missing") is None

    @pytest.mark.asyncio
    async def test_delete_customer(self, customer_service, acme):
        await customer_service.delete_customer(acme.id)
        assert await customer_service.list_customers() == []

    @pytest.mark.asyncio
    async def test_delete_missing_customer(self, customer_service):
        with pytest.raises(NotFoundError):
            await customer_service.delete_customer("missing")
