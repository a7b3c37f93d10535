"""
Partial-update builder shared by every repository.

A repository declares its updatable columns as a fixed tuple of
:class:`UpdatableField` descriptors. :func:`build_partial_update` walks that
tuple in order and keeps the fields that are own keys of the incoming payload.
A key explicitly set to ``None`` is kept and nulls the column; a missing key is
left alone. Column names always come from the descriptors, never from the
payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import Table, update

from app.core.errors import InvalidUpdate


@dataclass(frozen=True)
class UpdatableField:
    """Descriptor for one column a client may change"""
    name: str
    nullable: bool = True
    convert: Optional[Callable[[Any], Any]] = None

    def extract(self, payload: Mapping[str, Any]) -> Any:
        value = payload[self.name]
        if value is None:
            if not self.nullable:
                raise InvalidUpdate(f"{self.name} cannot be null")
            return None
        return self.convert(value) if self.convert else value


@dataclass(frozen=True)
class PartialUpdate:
    """Ordered column assignments for one row"""
    assignments: Tuple[Tuple[str, Any], ...]
    target_id: int

    @property
    def columns(self) -> List[str]:
        return [name for name, _ in self.assignments]

    @property
    def params(self) -> List[Any]:
        """Assignment values in allow-list order, followed by the target id"""
        return [value for _, value in self.assignments] + [self.target_id]

    def statement(self, table: Table):
        return (
            update(table)
            .where(table.c.id == self.target_id)
            .ordered_values(*[(table.c[name], value) for name, value in self.assignments])
        )


def build_partial_update(
    fields: Sequence[UpdatableField], payload: Mapping[str, Any], target_id: int
) -> PartialUpdate:
    """Build the assignment set for ``target_id`` from ``payload``.

    Raises InvalidUpdate when no allow-listed field is present.
    """
    assignments = tuple(
        (field.name, field.extract(payload)) for field in fields if field.name in payload
    )
    if not assignments:
        raise InvalidUpdate("No valid fields to update")
    return PartialUpdate(assignments=assignments, target_id=target_id)
