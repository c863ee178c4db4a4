"""Domain service for script management.

Every write runs in a single store transaction, so a script row and its
customer assignments are committed together or not at all. Writes to one
script id are additionally serialized through ``Store.lock`` so that two
concurrent updates cannot interleave their assignment rewrites.

Customer ids that do not reference an existing customer are checked before
anything is written. By default they are dropped with a warning; with
``reject_unknown_customers`` the whole operation fails with
:class:`ConflictError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from script_registry.db.models import ScriptCategory, generate_uuid
from script_registry.infrastructure.database.repositories.customer_repository import SqlCustomerRepository
from script_registry.infrastructure.database.repositories.script_repository import SqlScriptRepository
from script_registry.infrastructure.database.store import Store
from script_registry.modules.common.exceptions import ConflictError, NotFoundError, ValidationError
from script_registry.modules.customers.repository import CustomerRepository

from .models import Script, ScriptFields, ScriptInput, as_utc
from .repository import ScriptRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


def parse_category(value: ScriptCategory | str | None) -> ScriptCategory:
    if isinstance(value, ScriptCategory):
        return value
    if _is_blank(value):
        raise ValidationError("Name, command, and category are required")
    try:
        return ScriptCategory(value)
    except ValueError as exc:
        allowed = ", ".join(category.value for category in ScriptCategory)
        raise ValidationError(f"Invalid category {value!r}, expected one of: {allowed}") from exc


def validate_script_input(payload: ScriptInput) -> tuple[ScriptFields, list[str]]:
    """Check a payload before any store access; returns fields and unique customer ids."""
    if _is_blank(payload.name) or _is_blank(payload.command) or _is_blank(payload.category):
        raise ValidationError("Name, command, and category are required")
    category = parse_category(payload.category)

    customer_ids: list[str] = []
    for customer_id in payload.customer_ids or ():
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise ValidationError(f"Invalid customer id: {customer_id!r}")
        if customer_id not in customer_ids:
            customer_ids.append(customer_id)

    fields = ScriptFields(
        name=payload.name,
        command=payload.command,
        category=category,
        description=payload.description or "",
        is_global=bool(payload.is_global),
        auto_enrollment=bool(payload.auto_enrollment),
    )
    return fields, customer_ids


def _lock_key(script_id: str) -> str:
    return f"script:{script_id}"


@dataclass(slots=True)
class ScriptService:
    store: Store
    reject_unknown_customers: bool = False
    repository_factory: Callable[[AsyncSession], ScriptRepository] = SqlScriptRepository
    customer_repository_factory: Callable[[AsyncSession], CustomerRepository] = SqlCustomerRepository
    clock: Callable[[], datetime] = _utcnow

    async def list_scripts(self) -> list[Script]:
        async with self.store.session() as session:
            repository = self.repository_factory(session)
            models = await repository.list_scripts()
            assignments = await repository.resolve_assignments_many(model.id for model in models)
            return [Script.from_orm(model, assignments.get(model.id, ())) for model in models]

    async def get_script(self, script_id: str) -> Script | None:
        async with self.store.session() as session:
            repository = self.repository_factory(session)
            model = await repository.get_by_id(script_id)
            if model is None:
                return None
            return Script.from_orm(model, await repository.resolve_assignments(script_id))

    async def resolve_assignments(self, script_id: str) -> set[str]:
        async with self.store.session() as session:
            return await self.repository_factory(session).resolve_assignments(script_id)

    async def create_script(self, payload: ScriptInput) -> Script:
        fields, customer_ids = validate_script_input(payload)
        script_id = generate_uuid()

        async with self.store.lock(_lock_key(script_id)), self.store.session() as session:
            repository = self.repository_factory(session)
            assignable = await self._assignable_ids(session, customer_ids)
            model = await repository.create_script(
                script_id=script_id,
                fields=fields,
                created_at=self.clock(),
            )
            await repository.replace_assignments(script_id, assignable)
            script = Script.from_orm(model, await repository.resolve_assignments(script_id))

        logger.info("Created script %s (%s) for %d customer(s)", script.id, script.name, len(script.customers))
        return script

    async def update_script(self, script_id: str, payload: ScriptInput) -> Script:
        fields, customer_ids = validate_script_input(payload)

        async with self.store.lock(_lock_key(script_id)), self.store.session() as session:
            repository = self.repository_factory(session)
            model = await repository.get_by_id(script_id)
            if model is None:
                raise NotFoundError(f"Script not found: {script_id}")

            assignable = await self._assignable_ids(session, customer_ids)
            model = await repository.update_script(
                model,
                fields=fields,
                updated_at=self._next_timestamp(model.updated_at),
            )
            await repository.replace_assignments(script_id, assignable)
            script = Script.from_orm(model, await repository.resolve_assignments(script_id))

        logger.info("Updated script %s (%s) for %d customer(s)", script.id, script.name, len(script.customers))
        return script

    async def delete_script(self, script_id: str) -> None:
        async with self.store.lock(_lock_key(script_id)), self.store.session() as session:
            deleted = await self.repository_factory(session).delete_script(script_id)
            if not deleted:
                raise NotFoundError(f"Script not found: {script_id}")
        logger.info("Deleted script %s", script_id)

    async def _assignable_ids(self, session: AsyncSession, customer_ids: Iterable[str]) -> list[str]:
        requested = list(customer_ids)
        existing = await self.customer_repository_factory(session).existing_ids(requested)
        unknown = [customer_id for customer_id in requested if customer_id not in existing]
        if unknown:
            if self.reject_unknown_customers:
                raise ConflictError(f"Unknown customer ids: {', '.join(unknown)}")
            logger.warning("Ignoring unknown customer ids: %s", ", ".join(unknown))
        return [customer_id for customer_id in requested if customer_id in existing]

    def _next_timestamp(self, previous: datetime | None) -> datetime:
        now = self.clock()
        if previous is not None and now <= as_utc(previous):
            # Keep updated_at strictly increasing even when the clock has not moved.
            now = as_utc(previous) + timedelta(microseconds=1)
        return now
