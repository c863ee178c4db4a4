"""SQLAlchemy powered repository for customer persistence."""

from __future__ import annotations

from typing import Iterable, Sequence

from sqlalchemy import delete, select

from script_registry.db.models import Customer as CustomerModel
from script_registry.modules.common.repository import AsyncRepository


class SqlCustomerRepository(AsyncRepository[CustomerModel]):
    async def list_customers(self) -> Sequence[CustomerModel]:
        stmt = select(CustomerModel).order_by(CustomerModel.name.asc())
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, customer_id: str) -> CustomerModel | None:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> CustomerModel | None:
        stmt = select(CustomerModel).where(CustomerModel.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_customer(self, *, customer_id: str, name: str) -> CustomerModel:
        model = await self.add(CustomerModel(id=customer_id, name=name))
        await self.session.refresh(model)
        return model

    async def delete_customer(self, customer_id: str) -> bool:
        # script_customers rows go with it through ON DELETE CASCADE.
        stmt = delete(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def existing_ids(self, customer_ids: Iterable[str]) -> set[str]:
        ids = set(customer_ids)
        if not ids:
            return set()
        stmt = select(CustomerModel.id).where(CustomerModel.id.in_(ids))
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
