"""Tests for settings loading and the service container."""

from __future__ import annotations

from script_registry.core.config import Settings
from script_registry.core.container import ApplicationContainer


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.api_prefix == "/api"
    assert settings.scripts.reject_unknown_customers is False
    assert settings.database.operation_timeout == 10.0


def test_nested_environment_overrides(monkeypatch, tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'env.db'}"
    monkeypatch.setenv("DATABASE__URL", url)
    monkeypatch.setenv("DATABASE__OPERATION_TIMEOUT", "2.5")
    monkeypatch.setenv("SCRIPTS__REJECT_UNKNOWN_CUSTOMERS", "true")
    monkeypatch.setenv("LOGGING__LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.database_url == url
    assert settings.database.operation_timeout == 2.5
    assert settings.scripts.reject_unknown_customers is True
    assert settings.logging.level == "debug"


def test_container_passes_policy_to_script_service(settings):
    settings.scripts.reject_unknown_customers = True
    container = ApplicationContainer.from_settings(settings)

    service = container.script_service()

    assert service.store is container.store
    assert service.reject_unknown_customers is True
    assert container.customer_service().store is container.store
