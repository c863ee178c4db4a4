"""Database infrastructure helpers (engine, sessions, store handle)."""

from .base import Base
from .store import ExecuteResult, Store

__all__ = ["Base", "ExecuteResult", "Store"]
