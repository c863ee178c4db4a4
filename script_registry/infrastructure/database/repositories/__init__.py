"""SQLAlchemy-backed repository implementations."""

from .customer_repository import SqlCustomerRepository
from .script_repository import SqlScriptRepository

__all__ = [
    "SqlCustomerRepository",
    "SqlScriptRepository",
]
