"""
Guest-related Pydantic schemas
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "PreferencesRequest",
    "GuestResponse",
    "LoginRequest",
]

class RegisterRequest(BaseModel):
    """Guest registration request"""
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    
    model_config = ConfigDict(populate_by_name=True)

class RegisterResponse(BaseModel):
    """Registration result returned to the client"""
    session_id: str = Field(alias="sessionId")
    guest_id: int = Field(alias="guestId")
    
    model_config = ConfigDict(populate_by_name=True)

class PreferencesRequest(BaseModel):
    """Food/drink selections keyed by catalog names"""
    guest_id: int = Field(alias="guestId")
    foods: Optional[List[str]] = None
    drinks: Optional[List[str]] = None
    comments: Optional[str] = None
    
    model_config = ConfigDict(populate_by_name=True)

class GuestResponse(BaseModel):
    """Guest record as shown to the admin"""
    id: int
    first_name: str
    last_name: str
    foods: List[str] = []
    drinks: List[str] = []
    comments: str = ""
    created_at: Optional[datetime] = None
    
    @field_validator("foods", "drinks", mode="before")
    @classmethod
    def empty_list_when_unset(cls, value):
        return value or []
    
    @field_validator("comments", mode="before")
    @classmethod
    def empty_comment_when_unset(cls, value):
        return value or ""
    
    model_config = ConfigDict(from_attributes=True)

class LoginRequest(BaseModel):
    """Admin login request"""
    password: Optional[str] = None
