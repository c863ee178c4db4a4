"""
Shared pytest fixtures for the script registry tests.

Every test gets its own SQLite file under ``tmp_path`` so the store, the
services and the HTTP client never share state between tests.
"""

from __future__ import annotations

from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from script_registry.core.config import DatabaseSettings, ScriptSettings, Settings
from script_registry.infrastructure.database.store import Store
from script_registry.main import create_app
from script_registry.modules.customers import CustomerService
from script_registry.modules.scripts import ScriptCategory, ScriptInput, ScriptService


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}"),
        scripts=ScriptSettings(reject_unknown_customers=False),
    )


@pytest_asyncio.fixture()
async def store(settings) -> AsyncIterator[Store]:
    store = Store.from_settings(settings)
    await store.init_schema()
    try:
        yield store
    finally:
        await store.dispose()


@pytest.fixture()
def customer_service(store) -> CustomerService:
    return CustomerService(store)


@pytest.fixture()
def script_service(store) -> ScriptService:
    return ScriptService(store)


@pytest_asyncio.fixture()
async def acme(customer_service):
    return await customer_service.create_customer("1", "Acme")


@pytest.fixture()
def make_script_input():
    def _make(**overrides) -> ScriptInput:
        values = {
            "name": "Patch",
            "command": "echo hi",
            "category": ScriptCategory.SOFTWARE,
        }
        values.update(overrides)
        return ScriptInput(**values)

    return _make


@pytest.fixture()
def client(settings) -> Iterator[TestClient]:
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client
