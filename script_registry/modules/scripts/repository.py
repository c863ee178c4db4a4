"""Repository protocol for script persistence."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol, Sequence

from script_registry.db.models import Script as ScriptModel

from .models import ScriptFields


class ScriptRepository(Protocol):
    async def list_scripts(self) -> Sequence[ScriptModel]:
        ...

    async def get_by_id(self, script_id: str) -> ScriptModel | None:
        ...

    async def create_script(
        self,
        *,
        script_id: str,
        fields: ScriptFields,
        created_at: datetime,
    ) -> ScriptModel:
        ...

    async def update_script(
        self,
        model: ScriptModel,
        *,
        fields: ScriptFields,
        updated_at: datetime,
    ) -> ScriptModel:
        ...

    async def delete_script(self, script_id: str) -> bool:
        ...

    async def replace_assignments(self, script_id: str, customer_ids: Iterable[str]) -> None:
        ...

    async def resolve_assignments(self, script_id: str) -> set[str]:
        ...

    async def resolve_assignments_many(self, script_ids: Iterable[str]) -> dict[str, set[str]]:
        ...
