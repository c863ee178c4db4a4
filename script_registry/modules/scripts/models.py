"""Domain models for scripts and their customer assignments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from script_registry.db import models as orm
from script_registry.db.models import ScriptCategory


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True)
class Script:
    """A script together with the ids of the customers it is assigned to."""

    id: str
    name: str
    command: str
    description: str
    category: ScriptCategory
    is_global: bool
    auto_enrollment: bool
    created_at: datetime
    updated_at: datetime
    customers: list[str] = field(default_factory=list)

    @classmethod
    def from_orm(cls, instance: orm.Script, customers: Iterable[str] = ()) -> "Script":
        return cls(
            id=str(instance.id),
            name=instance.name,
            command=instance.command,
            description=instance.description or "",
            category=ScriptCategory(instance.category),
            is_global=bool(instance.is_global),
            auto_enrollment=bool(instance.auto_enrollment),
            created_at=as_utc(instance.created_at),
            updated_at=as_utc(instance.updated_at),
            customers=sorted(customers),
        )


@dataclass(slots=True)
class ScriptInput:
    """Full set of caller supplied fields for creating or replacing a script."""

    name: Optional[str]
    command: Optional[str]
    category: ScriptCategory | str | None
    description: Optional[str] = ""
    is_global: bool = False
    auto_enrollment: bool = False
    customer_ids: Sequence[str] = ()


@dataclass(slots=True)
class ScriptFields:
    """Validated scalar fields ready to be written."""

    name: str
    command: str
    category: ScriptCategory
    description: str
    is_global: bool
    auto_enrollment: bool
