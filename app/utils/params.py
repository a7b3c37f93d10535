"""
Query/path parameter parsing for the HTTP boundary
"""

from typing import Optional, Tuple

from app.core.config import settings
from app.core.errors import ApiError
from app.services.validation import MAX_INTEGER

class ParamError(ApiError):
    """A query or path parameter is malformed or out of bounds"""

    http_status = 400

    def __init__(self, error: str, message: str):
        super().__init__(message)
        self.error = error

def _parse_int(raw: Optional[str]) -> Optional[int]:
    """None for a missing value; raises ValueError for a non-numeric one"""
    if raw is None or raw.strip() == "":
        return None
    return int(raw)

def parse_pagination(limit: Optional[str], offset: Optional[str]) -> Tuple[Optional[int], int]:
    """Parse and bounds-check limit/offset query parameters"""
    try:
        parsed_limit = _parse_int(limit)
        valid = parsed_limit is None or 1 <= parsed_limit <= settings.MAX_PAGE_SIZE
    except ValueError:
        valid = False
    if not valid:
        raise ParamError(
            "Invalid limit parameter",
            f"Limit must be a number between 1 and {settings.MAX_PAGE_SIZE}"
        )

    try:
        parsed_offset = _parse_int(offset)
        valid = parsed_offset is None or parsed_offset >= 0
    except ValueError:
        valid = False
    if not valid:
        raise ParamError("Invalid offset parameter", "Offset must be a non-negative number")

    return parsed_limit, parsed_offset or 0

def parse_bool(raw: Optional[str]) -> Optional[bool]:
    """Query-string boolean: 'true' is True, any other value is False"""
    if raw is None:
        return None
    return raw.strip().lower() == "true"

def parse_filter_id(name: str, raw: Optional[str]) -> Optional[int]:
    """Parse an optional positive integer filter"""
    try:
        value = _parse_int(raw)
        valid = value is None or 1 <= value <= MAX_INTEGER
    except ValueError:
        valid = False
    if not valid:
        raise ParamError(f"Invalid {name} parameter", f"{name} must be a positive integer")
    return value

def check_record_id(resource: str, record_id: int) -> int:
    """Reject path ids outside 1..MAX_INTEGER"""
    if not 1 <= record_id <= MAX_INTEGER:
        raise ParamError(
            f"Invalid {resource.lower()} ID",
            f"{resource} ID must be a positive integer"
        )
    return record_id
