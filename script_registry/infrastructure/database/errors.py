"""Translation of SQLAlchemy failures into the registry error taxonomy."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from script_registry.modules.common.exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)


def classify(exc: SQLAlchemyError) -> StoreError | ConflictError:
    if isinstance(exc, IntegrityError):
        return ConflictError(str(exc.orig) if exc.orig is not None else str(exc))
    return StoreError(str(exc))


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise raw SQLAlchemy exceptions as registry errors."""
    try:
        yield
    except SQLAlchemyError as exc:
        translated = classify(exc)
        logger.warning("Store operation failed (%s): %s", type(translated).__name__, translated)
        raise translated from exc
