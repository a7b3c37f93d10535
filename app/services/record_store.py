"""
Record store adapter: runs parameterized statements on a pooled connection
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError

from app.core.errors import (
    StoreBusyError,
    StoreConstraintError,
    StoreCorruptError,
    StoreError,
)

logger = logging.getLogger(__name__)

BUSY_CODES = ("SQLITE_BUSY", "SQLITE_LOCKED")
CORRUPT_CODES = ("SQLITE_CORRUPT", "SQLITE_NOTADB")


@dataclass(frozen=True)
class MutationResult:
    """Outcome of an INSERT/UPDATE/DELETE"""
    changed_count: int
    inserted_id: Optional[int] = None


def _driver_code(exc: SQLAlchemyError) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlite_errorname", None)
    if code:
        return code
    if isinstance(exc, IntegrityError):
        return "SQLITE_CONSTRAINT"
    return None


def translate_error(exc: SQLAlchemyError) -> StoreError:
    """Map a SQLAlchemy/driver exception onto the store error taxonomy"""
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    code = _driver_code(exc)
    lowered = message.lower()

    if isinstance(exc, IntegrityError) or (code and code.startswith("SQLITE_CONSTRAINT")):
        return StoreConstraintError(message, code or "SQLITE_CONSTRAINT")
    if (code and code.startswith(BUSY_CODES)) or "database is locked" in lowered or "database is busy" in lowered:
        return StoreBusyError(message, code or "SQLITE_BUSY")
    if (code and code.startswith(CORRUPT_CODES)) or "malformed" in lowered or "not a database" in lowered:
        return StoreCorruptError(message, code or "SQLITE_CORRUPT")
    return StoreError(message, code)


class RecordStore:
    """Executes one statement per call on a connection checked out of the engine pool.

    The connection is released on every exit path; a failed statement is
    rolled back and re-raised as a :class:`StoreError` subclass.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        try:
            with self.engine.begin() as conn:
                yield conn
        except DBAPIError as exc:
            error = translate_error(exc)
            logger.warning("Store error %s: %s", error.code, error.message)
            raise error from exc

    def fetch_all(self, statement) -> List[Dict[str, Any]]:
        with self.connection() as conn:
            return [dict(row) for row in conn.execute(statement).mappings()]

    def fetch_one(self, statement) -> Optional[Dict[str, Any]]:
        with self.connection() as conn:
            row = conn.execute(statement).mappings().first()
            return dict(row) if row is not None else None

    def scalar(self, statement) -> Any:
        with self.connection() as conn:
            return conn.execute(statement).scalar()

    def execute(self, statement) -> MutationResult:
        with self.connection() as conn:
            result = conn.execute(statement)
            inserted_id = None
            if result.is_insert and result.inserted_primary_key:
                inserted_id = result.inserted_primary_key[0]
            return MutationResult(changed_count=result.rowcount, inserted_id=inserted_id)
