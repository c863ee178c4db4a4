"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from script_registry.core.config import Settings
from script_registry.infrastructure.database.store import Store
from script_registry.modules.customers import CustomerService
from script_registry.modules.scripts import ScriptService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    store: Store

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        return cls(settings=settings, store=Store.from_settings(settings))

    def customer_service(self) -> CustomerService:
        return CustomerService(self.store)

    def script_service(self) -> ScriptService:
        return ScriptService(
            self.store,
            reject_unknown_customers=self.settings.scripts.reject_unknown_customers,
        )

    async def startup(self) -> None:
        await self.store.init_schema()

    async def shutdown(self) -> None:
        await self.store.dispose()


__all__ = ["ApplicationContainer"]
