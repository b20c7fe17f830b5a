"""
Catalog (food/drink) Pydantic schemas
"""

from typing import List
from pydantic import BaseModel, ConfigDict

__all__ = ["CatalogItemCreate", "CatalogItemResponse", "CatalogResponse"]

class CatalogItemCreate(BaseModel):
    """Schema for adding a food or drink"""
    name: str

class CatalogItemResponse(BaseModel):
    """Catalog entry as exposed to clients"""
    id: int
    name: str
    
    model_config = ConfigDict(from_attributes=True)

class CatalogResponse(BaseModel):
    """Full selectable catalog"""
    foods: List[CatalogItemResponse]
    drinks: List[CatalogItemResponse]
