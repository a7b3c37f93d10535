"""
Concepto model (expense category)
"""

from sqlalchemy import Column, Integer, String, Float

from app.core.db import Base

class Concepto(Base):
    __tablename__ = "conceptos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    subtotal = Column(Float, nullable=False)
