"""
Food and drink catalog models
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from app.core.db import Base

class Food(Base):
    __tablename__ = "foods"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

class Drink(Base):
    __tablename__ = "drinks"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
