"""Reusable FastAPI dependencies."""

from .services import get_container, get_customer_service, get_script_service, get_store

__all__ = [
    "get_container",
    "get_customer_service",
    "get_script_service",
    "get_store",
]
