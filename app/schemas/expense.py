"""
Expense-related Pydantic schemas
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

__all__ = ["ExpenseResponse"]

class ExpenseResponse(BaseModel):
    """Expense with the label of its concepto, if any"""
    id: int
    descripcion: str
    detalle: Optional[str] = None
    responsable: Optional[str] = None
    monto: float
    id_concept: Optional[int] = None
    concepto_descripcion: Optional[str] = None
    created_at: Optional[datetime] = None
