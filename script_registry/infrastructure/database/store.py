"""Store: the single relational database handle used by every service.

A ``Store`` owns one async engine plus its session factory and is created
explicitly (usually from :class:`~script_registry.core.config.Settings`) and
handed to the services that need it. It offers two ways in:

* ``session()`` yields an ``AsyncSession`` bound to one transaction, which the
  repositories use for multi-statement units of work (commit on success,
  rollback on failure).
* ``execute`` / ``query_one`` / ``query_all`` run a single statement, each in
  its own short transaction.

Both paths translate SQLAlchemy failures into the registry error taxonomy and
are bounded by ``operation_timeout`` seconds.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Hashable, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import Executable, Row, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from script_registry.core.config import Settings
from script_registry.modules.common.exceptions import StoreTimeoutError

from .base import Base
from .errors import translate_errors
from .locks import KeyedLock
from .session import build_engine, build_session_factory

logger = logging.getLogger(__name__)

Statement = Executable | str


@dataclass(slots=True)
class ExecuteResult:
    last_insert_id: Optional[int]
    rows_affected: int


def _as_executable(statement: Statement) -> Executable:
    if isinstance(statement, str):
        return text(statement)
    return statement


class Store:
    def __init__(self, engine: AsyncEngine, *, operation_timeout: float | None = None) -> None:
        self._engine = engine
        self._session_factory = build_session_factory(engine)
        self._operation_timeout = operation_timeout
        self._locks = KeyedLock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        engine = build_engine(settings.database, debug=settings.debug)
        return cls(engine, operation_timeout=settings.database.operation_timeout)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def operation_timeout(self) -> float | None:
        return self._operation_timeout

    async def init_schema(self) -> None:
        """Create the registry tables if they do not exist yet."""
        # Register the models on Base.metadata before create_all runs.
        from script_registry.db import models  # noqa: F401

        async with self._bounded():
            with translate_errors():
                async with self._engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready at %s", self._engine.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._bounded():
            async with self._session_factory() as session:
                try:
                    with translate_errors():
                        yield session
                        await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    @asynccontextmanager
    async def lock(self, key: Hashable) -> AsyncIterator[None]:
        """Serialize callers that share ``key`` within this process.

        Waiting for the lock counts against ``operation_timeout``.
        """
        try:
            async with self._locks.hold(key, timeout=self._operation_timeout):
                yield
        except StoreTimeoutError:
            raise
        except TimeoutError as exc:
            logger.error("Waiting for lock %r exceeded %ss", key, self._operation_timeout)
            raise StoreTimeoutError(
                f"waiting for lock {key!r} exceeded {self._operation_timeout}s"
            ) from exc

    async def execute(self, statement: Statement, params: Mapping[str, Any] | None = None) -> ExecuteResult:
        async with self._bounded():
            with translate_errors():
                async with self._engine.begin() as conn:
                    result = await conn.execute(_as_executable(statement), dict(params or {}))
                    return ExecuteResult(
                        last_insert_id=result.lastrowid,
                        rows_affected=result.rowcount,
                    )

    async def query_one(self, statement: Statement, params: Mapping[str, Any] | None = None) -> Row | None:
        async with self._bounded():
            with translate_errors():
                async with self._engine.connect() as conn:
                    result = await conn.execute(_as_executable(statement), dict(params or {}))
                    return result.first()

    async def query_all(self, statement: Statement, params: Mapping[str, Any] | None = None) -> list[Row]:
        async with self._bounded():
            with translate_errors():
                async with self._engine.connect() as conn:
                    result = await conn.execute(_as_executable(statement), dict(params or {}))
                    return list(result.all())

    @asynccontextmanager
    async def _bounded(self) -> AsyncIterator[None]:
        try:
            async with asyncio.timeout(self._operation_timeout):
                yield
        except StoreTimeoutError:
            raise
        except TimeoutError as exc:
            logger.error("Store operation exceeded %ss", self._operation_timeout)
            raise StoreTimeoutError(
                f"store operation exceeded {self._operation_timeout}s"
            ) from exc
