"""
Pydantic schemas package
"""

from .common import *
from .guest import *
from .catalog import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "RegisterRequest",
    "RegisterResponse",
    "PreferencesRequest",
    "GuestResponse",
    "LoginRequest",
    "CatalogItemCreate",
    "CatalogItemResponse",
    "CatalogResponse",
]
