"""
Database models package
"""

from .guest import Guest
from .grupo import Grupo
from .concepto import Concepto
from .expense import Expense

__all__ = ["Guest", "Grupo", "Concepto", "Expense"]
