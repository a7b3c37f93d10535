"""
Request payload validation and normalization.

Each ``validate_*`` function checks a JSON payload for one entity and returns
``(payload, errors)``. The payload is normalized in place (strings trimmed,
gender lower-cased) so the same mapping can be handed to the repository.
Errors are collected for every failing field, in field order.
"""

import math
import re
from datetime import date
from typing import Any, Dict, List, Sequence, Tuple

from app.core.errors import ValidationError


GENDERS = ("male", "female", "other", "prefer not to say")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NAME_MAX_LENGTH = 100
MAX_INTEGER = 2**63 - 1  # SQLite INTEGER range
DETAIL_MAX_LENGTH = 500

NO_FIELDS_MESSAGE = "At least one valid field must be provided for update"

GUEST_FIELDS = (
    "first_name", "last_name", "gender", "family",
    "guest_count", "expiration_date", "confirmation",
)
GRUPO_FIELDS = ("nombre",)
CONCEPTO_FIELDS = ("nombre", "subtotal")
EXPENSE_FIELDS = ("descripcion", "detalle", "responsable", "monto", "id_concept")

Payload = Dict[str, Any]


def require_valid(errors: List[str]) -> None:
    """Raise ValidationError carrying every collected message"""
    if errors:
        raise ValidationError(errors)


def _has_any_field(payload: Payload, fields: Sequence[str]) -> bool:
    return any(field in payload for field in fields)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _as_integer(value: Any):
    """Return value as an int when it is integral and fits an SQLite INTEGER, otherwise None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and -MAX_INTEGER - 1 <= value <= MAX_INTEGER:
        return value
    return None


def _check_required_string(
    payload: Payload, field: str, errors: List[str], partial: bool, max_length: int = NAME_MAX_LENGTH
) -> None:
    if partial and field not in payload:
        return

    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        if partial:
            errors.append(f"{field} must be a non-empty string if provided")
        else:
            errors.append(f"{field} is required and must be a non-empty string")
        return

    trimmed = value.strip()
    if len(trimmed) > max_length:
        errors.append(f"{field} must not exceed {max_length} characters")
        return
    payload[field] = trimmed


def _check_optional_string(payload: Payload, field: str, errors: List[str], max_length: int) -> None:
    value = payload.get(field)
    if value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{field} must be a string if provided")
        return

    trimmed = value.strip()
    if len(trimmed) > max_length:
        errors.append(f"{field} must not exceed {max_length} characters")
        return
    payload[field] = trimmed


def _check_gender(payload: Payload, errors: List[str]) -> None:
    value = payload.get("gender")
    if value is None:
        return
    if not isinstance(value, str) or not value.strip():
        errors.append("gender must be a non-empty string if provided")
        return

    normalized = value.strip().lower()
    if normalized not in GENDERS:
        errors.append(f"gender must be one of: {', '.join(GENDERS)}")
        return
    payload["gender"] = normalized


def _check_integer_range(
    payload: Payload, field: str, errors: List[str], message: str, minimum: int, maximum: int = None
) -> None:
    value = payload.get(field)
    if value is None:
        return

    number = _as_integer(value)
    if number is None or number < minimum or (maximum is not None and number > maximum):
        errors.append(message)
        return
    payload[field] = number


def _check_date(payload: Payload, field: str, errors: List[str]) -> None:
    value = payload.get(field)
    if value is None:
        return
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        errors.append(f"{field} must be in YYYY-MM-DD format")
        return
    try:
        date.fromisoformat(value)
    except ValueError:
        errors.append(f"{field} must be a valid date")


def _check_boolean(payload: Payload, field: str, errors: List[str]) -> None:
    value = payload.get(field)
    if value is not None and not isinstance(value, bool):
        errors.append(f"{field} must be a boolean value")


def validate_guest(payload: Payload, partial: bool = False) -> Tuple[Payload, List[str]]:
    """Validate a guest payload for create (partial=False) or update (partial=True)"""
    if partial and not _has_any_field(payload, GUEST_FIELDS):
        return payload, [NO_FIELDS_MESSAGE]

    errors: List[str] = []
    _check_required_string(payload, "first_name", errors, partial)
    _check_required_string(payload, "last_name", errors, partial)
    _check_gender(payload, errors)
    _check_optional_string(payload, "family", errors, NAME_MAX_LENGTH)
    _check_integer_range(
        payload, "guest_count", errors,
        "guest_count must be an integer between 1 and 50", minimum=1, maximum=50,
    )
    _check_date(payload, "expiration_date", errors)
    _check_boolean(payload, "confirmation", errors)
    return payload, errors


def validate_expense(payload: Payload, partial: bool = False) -> Tuple[Payload, List[str]]:
    """Validate an expense payload"""
    if partial and not _has_any_field(payload, EXPENSE_FIELDS):
        return payload, [NO_FIELDS_MESSAGE]

    errors: List[str] = []
    _check_required_string(payload, "descripcion", errors, partial)
    _check_optional_string(payload, "detalle", errors, DETAIL_MAX_LENGTH)
    _check_optional_string(payload, "responsable", errors, NAME_MAX_LENGTH)

    monto = payload.get("monto")
    if partial:
        if monto is not None and (not _is_number(monto) or monto <= 0):
            errors.append("monto must be a positive number if provided")
    elif not _is_number(monto) or monto <= 0:
        errors.append("monto is required and must be a positive number")

    _check_integer_range(
        payload, "id_concept", errors,
        "id_concept must be a positive integer if provided", minimum=1,
    )
    return payload, errors


def validate_grupo(payload: Payload, partial: bool = False) -> Tuple[Payload, List[str]]:
    """Validate a grupo payload"""
    if partial and not _has_any_field(payload, GRUPO_FIELDS):
        return payload, [NO_FIELDS_MESSAGE]

    errors: List[str] = []
    _check_required_string(payload, "nombre", errors, partial)
    return payload, errors


def validate_concepto(payload: Payload, partial: bool = False) -> Tuple[Payload, List[str]]:
    """Validate a concepto payload"""
    if partial and not _has_any_field(payload, CONCEPTO_FIELDS):
        return payload, [NO_FIELDS_MESSAGE]

    errors: List[str] = []
    _check_required_string(payload, "nombre", errors, partial)

    subtotal = payload.get("subtotal")
    if partial:
        if subtotal is not None and (not _is_number(subtotal) or subtotal < 0):
            errors.append("subtotal must be a non-negative number if provided")
    elif not _is_number(subtotal) or subtotal < 0:
        errors.append("subtotal is required and must be a non-negative number")
    return payload, errors
