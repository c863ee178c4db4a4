"""Tests for the demo data seed command."""

from __future__ import annotations

import pytest

from script_registry.core.container import ApplicationContainer
from script_registry.seed import DEMO_CUSTOMERS, DEMO_SCRIPTS, seed_database


@pytest.mark.asyncio
async def test_seed_is_repeatable(settings):
    container = ApplicationContainer.from_settings(settings)
    try:
        assert await seed_database(container) == (len(DEMO_CUSTOMERS), len(DEMO_SCRIPTS))
        assert await seed_database(container) == (0, 0)

        scripts = await container.script_service().list_scripts()
        by_name = {script.name: script for script in scripts}
        assert by_name["Install Windows updates"].customers == ["1", "2", "3"]
        assert by_name["Install Windows updates"].auto_enrollment is True
        assert {script.category.value for script in scripts} == {
            "software",
            "security",
            "configuration",
            "command",
        }
    finally:
        await container.shutdown()
