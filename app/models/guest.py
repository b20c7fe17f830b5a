"""
Guest model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from app.core.db import Base

class Guest(Base):
    __tablename__ = "guests"
    
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    # Snapshots of catalog names at submission time, not foreign keys
    foods = Column(JSON, nullable=True)
    drinks = Column(JSON, nullable=True)
    comments = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
