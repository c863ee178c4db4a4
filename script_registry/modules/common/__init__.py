"""Shared abstractions used across domain modules."""

from .exceptions import (
    ConflictError,
    NotFoundError,
    RegistryError,
    StoreError,
    StoreTimeoutError,
    ValidationError,
)
from .repository import AsyncRepository

__all__ = [
    "AsyncRepository",
    "ConflictError",
    "NotFoundError",
    "RegistryError",
    "StoreError",
    "StoreTimeoutError",
    "ValidationError",
]
