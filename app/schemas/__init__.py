"""
Pydantic schemas package
"""

from .common import *
from .guest import *
from .grupo import *
from .concepto import *
from .expense import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "ListMeta",
    "GuestResponse",
    "GrupoResponse",
    "ConceptoResponse",
    "ExpenseResponse",
]
