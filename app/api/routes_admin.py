"""
Admin API routes - requires authentication
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import get_db
from app.schemas.catalog import CatalogItemCreate, CatalogItemResponse
from app.schemas.guest import GuestResponse, LoginRequest
from app.services.catalog_service import CatalogService
from app.services.preference_service import PreferenceService
from app.utils.security import verify_admin_session, check_admin_password, is_admin
from app.utils.responses import success_response, error_response, not_found_error

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/login")
async def login(login_data: LoginRequest):
    """Check the shared password and set the admin cookie"""
    if not check_admin_password(login_data.password):
        logger.warning("Failed admin login attempt")
        return error_response(message="Invalid password", status_code=401)
    
    response = success_response(message="Logged in")
    response.set_cookie(
        key=settings.ADMIN_COOKIE_NAME,
        value=settings.ADMIN_COOKIE_VALUE,
        max_age=settings.ADMIN_SESSION_MAX_AGE,
        httponly=False
    )
    logger.info("Admin logged in")
    return response

@router.post("/logout")
async def logout():
    """Clear the admin cookie"""
    response = success_response(message="Logged out")
    response.delete_cookie(settings.ADMIN_COOKIE_NAME)
    return response

@router.get("/check")
async def check_admin(request: Request):
    """Report whether the caller holds the admin cookie"""
    return {"isAdmin": is_admin(request)}

@router.get("/guests", response_model=List[GuestResponse])
def list_guests(
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """All guests, newest registration first"""
    return PreferenceService.list_guests(db)

@router.delete("/guests/{guest_id}")
def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """Remove a guest"""
    if not PreferenceService.delete_guest(guest_id, db):
        not_found_error("Guest")
    
    return success_response(
        message="Guest deleted",
        data={"deleted_guest_id": guest_id}
    )

@router.post("/foods", response_model=CatalogItemResponse)
def add_food(
    item: CatalogItemCreate,
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """Add a food to the catalog"""
    try:
        food = CatalogService.add_food(item.name, db)
    except ValueError as e:
        return error_response(message=str(e), status_code=400)
    return food

@router.delete("/foods/{food_id}")
def remove_food(
    food_id: int,
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """Remove a food from the catalog"""
    if not CatalogService.remove_food(food_id, db):
        not_found_error("Food")
    
    return success_response(
        message="Food deleted",
        data={"deleted_food_id": food_id}
    )

@router.post("/drinks", response_model=CatalogItemResponse)
def add_drink(
    item: CatalogItemCreate,
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """Add a drink to the catalog"""
    try:
        drink = CatalogService.add_drink(item.name, db)
    except ValueError as e:
        return error_response(message=str(e), status_code=400)
    return drink

@router.delete("/drinks/{drink_id}")
def remove_drink(
    drink_id: int,
    db: Session = Depends(get_db),
    admin: str = Depends(verify_admin_session)
):
    """Remove a drink from the catalog"""
    if not CatalogService.remove_drink(drink_id, db):
        not_found_error("Drink")
    
    return success_response(
        message="Drink deleted",
        data={"deleted_drink_id": drink_id}
    )
