"""
Standardized response utilities
"""

from typing import Any, Dict, Iterable, List, Optional, Type
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.schemas.common import StandardResponse, ErrorResponse, ListMeta

def _drop_empty(content: Dict[str, Any]) -> Dict[str, Any]:
    """Drop top-level keys left unset; nested nulls are kept"""
    return {key: value for key, value in content.items() if value is not None}

def serialize(schema: Type[BaseModel], record: Dict[str, Any]) -> Dict[str, Any]:
    """Render a repository record through its response schema"""
    return schema.model_validate(record).model_dump(mode="json")

def serialize_many(schema: Type[BaseModel], records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize(schema, record) for record in records]

def success_response(
    data: Any = None,
    message: Optional[str] = None,
    meta: Optional[ListMeta] = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data,
        meta=meta
    )
    return JSONResponse(
        content=_drop_empty(response.model_dump(mode="json")),
        status_code=status_code
    )

def list_response(
    data: List[Dict[str, Any]],
    total: int,
    limit: Optional[int] = None,
    offset: Optional[int] = None
) -> JSONResponse:
    """Create a list response with pagination metadata"""
    meta = ListMeta(total=total, count=len(data), limit=limit, offset=offset or 0)
    response = StandardResponse(success=True, data=data, meta=meta)
    content = response.model_dump(mode="json", exclude={"message"})
    return JSONResponse(content=content, status_code=200)

def error_response(
    error: str,
    message: str,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        error=error,
        message=message,
        details=details
    )
    return JSONResponse(
        content=_drop_empty(response.model_dump(mode="json")),
        status_code=status_code
    )
