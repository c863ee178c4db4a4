"""Domain services for customer management."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from script_registry.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from script_registry.infrastructure.database.store import Store
from script_registry.modules.common.exceptions import ConflictError, NotFoundError, ValidationError

from .models import Customer
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


@dataclass(slots=True)
class CustomerService:
    """Encapsulates core customer use cases."""

    store: Store
    repository_factory: Callable[[AsyncSession], CustomerRepository] = SqlCustomerRepository

    async def list_customers(self) -> list[Customer]:
        async with self.store.session() as session:
            models = await self.repository_factory(session).list_customers()
            return [Customer.from_orm(model) for model in models]

    async def get_customer(self, customer_id: str) -> Customer | None:
        async with self.store.session() as session:
            model = await self.repository_factory(session).get_by_id(customer_id)
            return Customer.from_orm(model) if model else None

    async def create_customer(self, customer_id: str, name: str) -> Customer:
        if _is_blank(customer_id) or _is_blank(name):
            raise ValidationError("Customer id and name are required")

        async with self.store.session() as session:
            repository = self.repository_factory(session)
            if await repository.get_by_id(customer_id) is not None:
                raise ConflictError(f"Customer id already exists: {customer_id}")
            if await repository.get_by_name(name) is not None:
                raise ConflictError(f"Customer name already exists: {name}")
            model = await repository.create_customer(customer_id=customer_id, name=name)
            customer = Customer.from_orm(model)

        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer

    async def delete_customer(self, customer_id: str) -> None:
        async with self.store.session() as session:
            deleted = await self.repository_factory(session).delete_customer(customer_id)
            if not deleted:
                raise NotFoundError(f"Customer not found: {customer_id}")
        logger.info("Deleted customer %s", customer_id)
