"""Repository protocol for customers."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from script_registry.db.models import Customer as CustomerModel


class CustomerRepository(Protocol):
    """Abstract repository interface for customer persistence."""

    async def list_customers(self) -> Sequence[CustomerModel]:
        ...

    async def get_by_id(self, customer_id: str) -> CustomerModel | None:
        ...

    async def get_by_name(self, name: str) -> CustomerModel | None:
        ...

    async def create_customer(self, *, customer_id: str, name: str) -> CustomerModel:
        ...

    async def delete_customer(self, customer_id: str) -> bool:
        ...

    async def existing_ids(self, customer_ids: Iterable[str]) -> set[str]:
        ...
