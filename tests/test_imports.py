"""Entry points must import cleanly in a fresh interpreter."""

from __future__ import annotations

import subprocess
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "script_registry.main",
        "script_registry.seed",
        "script_registry.core.container",
        "script_registry.modules.customers",
        "script_registry.infrastructure.database.repositories",
    ],
)
def test_module_imports_on_its_own(module):
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
