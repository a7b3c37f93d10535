"""
Expense model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey

from app.core.db import Base

class Expense(Base):
    __tablename__ = "expenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    descripcion = Column(String(100), nullable=False)
    detalle = Column(String(500), nullable=True)
    responsable = Column(String(100), nullable=True)
    monto = Column(Float, nullable=False)
    id_concept = Column(Integer, ForeignKey("conceptos.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
