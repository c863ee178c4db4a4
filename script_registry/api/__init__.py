from fastapi import APIRouter

from script_registry.interfaces.http.routers import customers, health, scripts


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(customers.router, prefix="/customers", tags=["customers"])
    router.include_router(scripts.router, prefix="/scripts", tags=["scripts"])
    router.include_router(health.router, tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
