"""
Repository layer: one stateless class per table on top of the record store.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import Table, delete, func, insert, select

from app.core.errors import NotFoundError
from app.models import Concepto, Expense, Grupo, Guest
from app.services.partial_update import UpdatableField, build_partial_update
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)

Filters = Optional[Dict[str, Any]]


def _to_date(value: Any) -> date:
    return value if isinstance(value, date) else date.fromisoformat(value)


class TableRepo:
    """Generic CRUD over a single table.

    Subclasses set ``table``, ``resource``, ``updatable_fields`` and
    ``order_by``; they may override ``_conditions``, ``_base_select`` and
    ``_to_record`` for filters, joins and read-side coercion.
    """

    table: Table
    resource: str = "Record"
    updatable_fields: Sequence[UpdatableField] = ()
    defaults: Dict[str, Any] = {}

    @classmethod
    def order_by(cls) -> list:
        return [cls.table.c.id.asc()]

    @classmethod
    def _conditions(cls, filters: Filters) -> list:
        return []

    @classmethod
    def _base_select(cls):
        return select(cls.table)

    @classmethod
    def _to_record(cls, row: Dict[str, Any]) -> Dict[str, Any]:
        return row

    @classmethod
    def find_all(
        cls,
        store: RecordStore,
        filters: Filters = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        query = cls._base_select()
        conditions = cls._conditions(filters or {})
        if conditions:
            query = query.where(*conditions)
        query = query.order_by(*cls.order_by())
        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        return [cls._to_record(row) for row in store.fetch_all(query)]

    @classmethod
    def find_by_id(cls, store: RecordStore, record_id: int) -> Optional[Dict[str, Any]]:
        row = store.fetch_one(cls._base_select().where(cls.table.c.id == record_id))
        return cls._to_record(row) if row is not None else None

    @classmethod
    def exists(cls, store: RecordStore, record_id: int) -> bool:
        query = select(cls.table.c.id).where(cls.table.c.id == record_id)
        return store.scalar(query) is not None

    @classmethod
    def create(cls, store: RecordStore, data: Dict[str, Any]) -> int:
        values = {}
        for field in cls.updatable_fields:
            value = data.get(field.name)
            if value is None:
                values[field.name] = cls.defaults.get(field.name)
            else:
                values[field.name] = field.convert(value) if field.convert else value

        result = store.execute(insert(cls.table).values(**values))
        logger.info("%s created with id %s", cls.resource, result.inserted_id)
        return result.inserted_id

    @classmethod
    def update(cls, store: RecordStore, record_id: int, data: Dict[str, Any]) -> int:
        plan = build_partial_update(cls.updatable_fields, data, record_id)
        if not cls.exists(store, record_id):
            raise NotFoundError(cls.resource, record_id)

        result = store.execute(plan.statement(cls.table))
        logger.info("%s %s updated: %s", cls.resource, record_id, ", ".join(plan.columns))
        return result.changed_count

    @classmethod
    def delete(cls, store: RecordStore, record_id: int) -> int:
        if not cls.exists(store, record_id):
            raise NotFoundError(cls.resource, record_id)

        result = store.execute(delete(cls.table).where(cls.table.c.id == record_id))
        logger.info("%s %s deleted", cls.resource, record_id)
        return result.changed_count

    @classmethod
    def count(cls, store: RecordStore, filters: Filters = None) -> int:
        query = select(func.count()).select_from(cls.table)
        conditions = cls._conditions(filters or {})
        if conditions:
            query = query.where(*conditions)
        return store.scalar(query)


# -------- Guest repository --------

class GuestRepo(TableRepo):
    table = Guest.__table__
    resource = "Guest"
    updatable_fields = (
        UpdatableField("first_name", nullable=False),
        UpdatableField("last_name", nullable=False),
        UpdatableField("gender"),
        UpdatableField("family"),
        UpdatableField("guest_count", nullable=False, convert=int),
        UpdatableField("expiration_date", convert=_to_date),
        UpdatableField("confirmation", nullable=False, convert=bool),
    )
    defaults = {"guest_count": 1, "confirmation": False}

    @classmethod
    def order_by(cls) -> list:
        return [cls.table.c.created_at.desc(), cls.table.c.id.desc()]

    @classmethod
    def _conditions(cls, filters: Dict[str, Any]) -> list:
        conditions = []
        if filters.get("gender"):
            conditions.append(cls.table.c.gender == filters["gender"])
        if filters.get("family"):
            conditions.append(cls.table.c.family.like(f"%{filters['family']}%"))
        if filters.get("confirmation") is not None:
            conditions.append(cls.table.c.confirmation == bool(filters["confirmation"]))
        return conditions

    @classmethod
    def _to_record(cls, row: Dict[str, Any]) -> Dict[str, Any]:
        row["confirmation"] = bool(row.get("confirmation"))
        return row


# -------- Grupo repository --------

class GrupoRepo(TableRepo):
    table = Grupo.__table__
    resource = "Grupo"
    updatable_fields = (
        UpdatableField("nombre", nullable=False),
    )

    @classmethod
    def order_by(cls) -> list:
        return [cls.table.c.nombre.asc(), cls.table.c.id.asc()]


# -------- Concepto repository --------

class ConceptoRepo(TableRepo):
    table = Concepto.__table__
    resource = "Concepto"
    updatable_fields = (
        UpdatableField("nombre", nullable=False),
        UpdatableField("subtotal", nullable=False, convert=float),
    )

    @classmethod
    def order_by(cls) -> list:
        return [cls.table.c.nombre.asc(), cls.table.c.id.asc()]


# -------- Expense repository --------

class ExpenseRepo(TableRepo):
    table = Expense.__table__
    resource = "Expense"
    updatable_fields = (
        UpdatableField("descripcion", nullable=False),
        UpdatableField("detalle"),
        UpdatableField("responsable"),
        UpdatableField("monto", nullable=False, convert=float),
        UpdatableField("id_concept", convert=int),
    )

    @classmethod
    def order_by(cls) -> list:
        return [cls.table.c.created_at.desc(), cls.table.c.id.desc()]

    @classmethod
    def _base_select(cls):
        conceptos = Concepto.__table__
        return (
            select(cls.table, conceptos.c.nombre.label("concepto_descripcion"))
            .select_from(cls.table.outerjoin(conceptos, cls.table.c.id_concept == conceptos.c.id))
        )

    @classmethod
    def _conditions(cls, filters: Dict[str, Any]) -> list:
        if filters.get("id_concept") is not None:
            return [cls.table.c.id_concept == filters["id_concept"]]
        return []
