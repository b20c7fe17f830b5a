"""
Database models package
"""

from .guest import Guest
from .catalog import Food, Drink

__all__ = ["Guest", "Food", "Drink"]
