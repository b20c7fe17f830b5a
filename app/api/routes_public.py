"""
Public API routes - no authentication required
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.catalog import CatalogItemResponse, CatalogResponse
from app.services.catalog_service import CatalogService

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/api/options", response_model=CatalogResponse)
def get_options(db: Session = Depends(get_db)):
    """Current food and drink catalog"""
    foods, drinks = CatalogService.list_catalog(db)
    return CatalogResponse(
        foods=[CatalogItemResponse.model_validate(food) for food in foods],
        drinks=[CatalogItemResponse.model_validate(drink) for drink in drinks]
    )
