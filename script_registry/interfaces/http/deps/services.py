"""Service dependency providers backed by the application container."""

from fastapi import Depends, Request

from script_registry.core.container import ApplicationContainer
from script_registry.infrastructure.database.store import Store
from script_registry.modules.customers import CustomerService
from script_registry.modules.scripts import ScriptService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_store(container: ApplicationContainer = Depends(get_container)) -> Store:
    return container.store


def get_customer_service(container: ApplicationContainer = Depends(get_container)) -> CustomerService:
    return container.customer_service()


def get_script_service(container: ApplicationContainer = Depends(get_container)) -> ScriptService:
    return container.script_service()


__all__ = [
    "get_container",
    "get_customer_service",
    "get_script_service",
    "get_store",
]
