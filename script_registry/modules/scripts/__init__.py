"""Public exports for script domain services."""

from .models import Script, ScriptCategory, ScriptFields, ScriptInput
from .repository import ScriptRepository
from .service import ScriptService, validate_script_input

__all__ = [
    "Script",
    "ScriptCategory",
    "ScriptFields",
    "ScriptInput",
    "ScriptRepository",
    "ScriptService",
    "validate_script_input",
]
