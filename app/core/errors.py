"""
Error taxonomy shared by the validator, repositories and the HTTP boundary.

Every error carries the HTTP status the boundary answers with plus the
``error``/``message``/``details`` triple of the error envelope.
"""

from typing import Any, List, Optional


class ApiError(Exception):
    """Base class for errors the HTTP boundary knows how to render"""

    http_status = 500
    error = "Internal Server Error"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self, include_details: bool = True) -> dict:
        body = {"error": self.error, "message": self.message}
        if include_details and self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ApiError):
    """One or more request fields failed validation"""

    http_status = 400
    error = "Validation failed"

    def __init__(self, errors: List[str]):
        super().__init__("The provided data contains validation errors", details=list(errors))
        self.errors = list(errors)


class InvalidUpdate(ApiError):
    """An update carried no recognized field to change"""

    http_status = 400
    error = "No valid fields provided"


class NotFoundError(ApiError):
    """Lookup by id found nothing"""

    http_status = 404

    def __init__(self, resource: str, record_id: Any):
        super().__init__(f"No {resource.lower()} found with ID {record_id}")
        self.resource = resource
        self.record_id = record_id
        self.error = f"{resource} not found"


class StoreError(ApiError):
    """Failure reported by the underlying database driver"""

    http_status = 500
    error = "Internal Server Error"
    public_message = "An unexpected error occurred while processing your request"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code

    def to_response(self, include_details: bool = True) -> dict:
        body = {"error": self.error, "message": self.public_message}
        if include_details:
            body["details"] = {"message": self.message, "code": self.code}
        return body


class StoreConstraintError(StoreError):
    """Unique, foreign-key, NOT NULL or CHECK violation"""

    http_status = 400
    error = "Database Constraint Error"
    public_message = "The operation violates database constraints"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code)
        if "UNIQUE" in message.upper():
            self.http_status = 409
            self.error = "Duplicate record"
            self.public_message = "A record with similar details already exists"


class StoreBusyError(StoreError):
    """Lock contention; the caller may retry"""

    http_status = 503
    error = "Database Busy"
    public_message = "Database is currently busy, please try again later"


class StoreCorruptError(StoreError):
    """Database file is damaged; not retried"""

    http_status = 500
    error = "Database Error"
    public_message = "Database corruption detected, please contact support"
