"""
Guest-related Pydantic schemas
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel

__all__ = ["GuestResponse"]

class GuestResponse(BaseModel):
    """Guest response schema"""
    id: int
    first_name: str
    last_name: str
    gender: Optional[str] = None
    family: Optional[str] = None
    guest_count: int = 1
    expiration_date: Optional[date] = None
    confirmation: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
