"""Liveness probe that touches the store."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from script_registry.infrastructure.database.store import Store
from script_registry.interfaces.http.deps import get_store
from script_registry.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: Store = Depends(get_store)):
    await store.query_one("SELECT 1")
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))
