"""SQLAlchemy implementation for ScriptRepository."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Sequence

from sqlalchemy import delete, desc, select

from script_registry.db.models import (
    Customer as CustomerModel,
    Script as ScriptModel,
    ScriptAssignment,
)
from script_registry.modules.common.repository import AsyncRepository

if TYPE_CHECKING:
    from script_registry.modules.scripts.models import ScriptFields


def _assignment_query():
    return select(ScriptAssignment.script_id, ScriptAssignment.customer_id).join(
        CustomerModel, CustomerModel.id == ScriptAssignment.customer_id
    )


class SqlScriptRepository(AsyncRepository[ScriptModel]):
    async def list_scripts(self) -> Sequence[ScriptModel]:
        stmt = select(ScriptModel).order_by(
            desc(ScriptModel.updated_at),
            desc(ScriptModel.created_at),
            ScriptModel.id,
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, script_id: str) -> ScriptModel | None:
        stmt = select(ScriptModel).where(ScriptModel.id == script_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_script(
        self,
        *,
        script_id: str,
        fields: ScriptFields,
        created_at: datetime,
    ) -> ScriptModel:
        script = ScriptModel(
            id=script_id,
            name=fields.name,
            command=fields.command,
            description=fields.description,
            category=fields.category.value,
            is_global=fields.is_global,
            auto_enrollment=fields.auto_enrollment,
            created_at=created_at,
            updated_at=created_at,
        )
        await self.add(script)
        await self.session.refresh(script)
        return script

    async def update_script(
        self,
        model: ScriptModel,
        *,
        fields: ScriptFields,
        updated_at: datetime,
    ) -> ScriptModel:
        model.name = fields.name
        model.command = fields.command
        model.description = fields.description
        model.category = fields.category.value
        model.is_global = fields.is_global
        model.auto_enrollment = fields.auto_enrollment
        model.updated_at = updated_at
        await self.flush()
        await self.session.refresh(model)
        return model

    async def delete_script(self, script_id: str) -> bool:
        await self.session.execute(
            delete(ScriptAssignment).where(ScriptAssignment.script_id == script_id)
        )
        result = await self.session.execute(delete(ScriptModel).where(ScriptModel.id == script_id))
        return bool(result.rowcount)

    async def replace_assignments(self, script_id: str, customer_ids: Iterable[str]) -> None:
        await self.session.execute(
            delete(ScriptAssignment).where(ScriptAssignment.script_id == script_id)
        )
        self.session.add_all(
            ScriptAssignment(script_id=script_id, customer_id=customer_id)
            for customer_id in sorted(set(customer_ids))
        )
        await self.flush()

    async def resolve_assignments(self, script_id: str) -> set[str]:
        stmt = _assignment_query().where(ScriptAssignment.script_id == script_id)
        result = await self.session.execute(stmt)
        return {row.customer_id for row in result}

    async def resolve_assignments_many(self, script_ids: Iterable[str]) -> dict[str, set[str]]:
        ids = list(script_ids)
        resolved: dict[str, set[str]] = defaultdict(set)
        if not ids:
            return resolved
        stmt = _assignment_query().where(ScriptAssignment.script_id.in_(ids))
        result = await self.session.execute(stmt)
        for row in result:
            resolved[row.script_id].add(row.customer_id)
        return resolved
