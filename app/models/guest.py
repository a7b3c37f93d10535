"""
Guest model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime

from app.core.db import Base


class Guest(Base):
    __tablename__ = "guests"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    gender = Column(String(32), nullable=True)  # male, female, other, prefer not to say
    family = Column(String(100), nullable=True)
    guest_count = Column(Integer, nullable=False, default=1)
    expiration_date = Column(Date, nullable=True)
    confirmation = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
