"""Domain models for customers."""

from __future__ import annotations

from dataclasses import dataclass

from script_registry.db import models as orm


@dataclass(slots=True)
class Customer:
    id: str
    name: str

    @classmethod
    def from_orm(cls, instance: orm.Customer) -> "Customer":
        return cls(id=str(instance.id), name=instance.name)
