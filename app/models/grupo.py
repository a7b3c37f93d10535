"""
Grupo model (cost grouping)
"""

from sqlalchemy import Column, Integer, String

from app.core.db import Base

class Grupo(Base):
    __tablename__ = "grupos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
