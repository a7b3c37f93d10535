"""
Concepto schemas
"""

from pydantic import BaseModel

__all__ = ["ConceptoResponse"]

class ConceptoResponse(BaseModel):
    id: int
    nombre: str
    subtotal: float
