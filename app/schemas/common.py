"""
Common Pydantic schemas
"""

from typing import Any, Optional
from pydantic import BaseModel

__all__ = ["StandardResponse", "ErrorResponse", "ListMeta"]

class ListMeta(BaseModel):
    """Pagination metadata attached to list responses"""
    total: int
    count: int
    limit: Optional[int] = None
    offset: int = 0

class StandardResponse(BaseModel):
    """Standard API response"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None
    meta: Optional[ListMeta] = None

class ErrorResponse(BaseModel):
    """Error response schema"""
    error: str
    message: str
    details: Optional[Any] = None