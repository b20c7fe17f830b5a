"""
Guest-facing API routes
"""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import get_db
from app.schemas.guest import RegisterRequest, RegisterResponse, PreferencesRequest
from app.services.preference_service import PreferenceService
from app.utils.security import rate_limit_check, get_client_ip, generate_guest_session_id
from app.utils.responses import success_response, error_response, rate_limit_error

router = APIRouter()

@router.post("/register", response_model=RegisterResponse)
def register_guest(
    request: Request,
    response: Response,
    register_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """Register a guest and hand back the id used by the preferences screen"""
    # Rate limiting
    client_ip = get_client_ip(request)
    if not rate_limit_check(client_ip):
        rate_limit_error()
    
    try:
        guest = PreferenceService.register_guest(
            first_name=register_data.first_name,
            last_name=register_data.last_name,
            db=db
        )
    except ValueError as e:
        return error_response(message=str(e), status_code=400)
    
    session_id = generate_guest_session_id()
    response.set_cookie(
        key=settings.GUEST_COOKIE_NAME,
        value=session_id,
        max_age=settings.GUEST_SESSION_MAX_AGE,
        httponly=False
    )
    
    return RegisterResponse(session_id=session_id, guest_id=guest.id)

@router.post("/save-preferences")
def save_preferences(
    request: Request,
    preferences: PreferencesRequest,
    db: Session = Depends(get_db)
):
    """Store a guest's food/drink selections and comment"""
    # Rate limiting
    client_ip = get_client_ip(request)
    if not rate_limit_check(client_ip):
        rate_limit_error()
    
    guest = PreferenceService.save_preferences(
        guest_id=preferences.guest_id,
        foods=preferences.foods,
        drinks=preferences.drinks,
        comments=preferences.comments,
        db=db
    )
    
    if not guest:
        return error_response(
            message="Guest not found. Please register again.",
            status_code=404
        )
    
    return success_response(
        message="Preferences saved",
        data={
            "guestId": guest.id,
            "foods": guest.foods,
            "drinks": guest.drinks,
            "comments": guest.comments
        }
    )
