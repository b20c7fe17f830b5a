"""
Security utilities and authentication
"""

import secrets
import threading
import time
from collections import defaultdict
from typing import Optional

from fastapi import Cookie, Request

from app.core.config import settings
from app.utils.responses import unauthorized_error

# Simple in-memory rate limiter, shared by threadpool workers
rate_limiter = defaultdict(list)
rate_limiter_lock = threading.Lock()

def is_admin(request: Request) -> bool:
    """Plain string comparison against the unsigned admin cookie"""
    return request.cookies.get(settings.ADMIN_COOKIE_NAME) == settings.ADMIN_COOKIE_VALUE

def verify_admin_session(
    admin_session: Optional[str] = Cookie(None, alias=settings.ADMIN_COOKIE_NAME)
):
    """Require the admin cookie set by a successful login"""
    if admin_session != settings.ADMIN_COOKIE_VALUE:
        unauthorized_error()
    return admin_session

def check_admin_password(password: Optional[str]) -> bool:
    if password is None:
        return False
    return password == settings.ADMIN_PASSWORD

def generate_guest_session_id() -> str:
    """Opaque guest session id, e.g. guest_1718000000000_k3j9x0a2b"""
    return f"guest_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"

def rate_limit_check(client_ip: str, limit: int = None) -> bool:
    """Simple rate limiting by IP address"""
    if limit is None:
        limit = settings.RATE_LIMIT_PER_MINUTE
    
    with rate_limiter_lock:
        current_time = time.time()
        minute_ago = current_time - 60
        
        _drop_idle_clients(minute_ago)
        
        # Clean old requests
        recent = [
            req_time for req_time in rate_limiter.get(client_ip, [])
            if req_time > minute_ago
        ]
        
        # Check limit
        if len(recent) >= limit:
            rate_limiter[client_ip] = recent
            return False
        
        # Add current request
        recent.append(current_time)
        rate_limiter[client_ip] = recent
        return True

def _drop_idle_clients(minute_ago: float) -> None:
    # Caller holds rate_limiter_lock
    for client_ip in list(rate_limiter):
        if not any(req_time > minute_ago for req_time in rate_limiter[client_ip]):
            del rate_limiter[client_ip]

def get_client_ip(request: Request) -> str:
    """Extract client IP from request"""
    # Check for forwarded IP first (for reverse proxy setups)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    
    # Check for real IP header
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    
    # Fall back to direct client IP
    return request.client.host if request.client else "unknown"
