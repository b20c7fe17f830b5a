"""
Event RSVP - FastAPI Backend
Main application entry point
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.core.config import settings
from app.core.db import engine, Base, SessionLocal
from app.api import routes_admin, routes_guest, routes_public
from app.services.catalog_service import CatalogService
from app.utils.responses import error_response

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    # Seed the default catalog into empty tables
    db = SessionLocal()
    try:
        CatalogService.seed_defaults(db)
    finally:
        db.close()
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Event RSVP",
    description="Guest registration and food/drink preferences",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the standard error envelope"""
    # Unknown browser pages get the HTML not-found screen
    if (
        exc.status_code == 404
        and request.method == "GET"
        and not request.url.path.startswith(("/api/", "/static/"))
    ):
        return templates.TemplateResponse(request, "not_found.html", {
            "title": "Страница не найдена",
            "path": request.url.path
        }, status_code=404)
    return error_response(message=str(exc.detail), status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed fields are a plain bad request"""
    return error_response(
        message="Missing or invalid fields",
        error_code="validation_error",
        details=jsonable_encoder(exc.errors()),
        status_code=400
    )

@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Any database failure surfaces as a generic 500"""
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response(message="Database error", status_code=500)

# Mount static files
app.mount("/static", StaticFiles(directory=os.path.join(BASE_DIR, "static")), name="static")

# Setup templates
templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_guest.router, prefix="/api", tags=["guest"])
app.include_router(routes_admin.router, prefix="/api/admin", tags=["admin"])

@app.get("/", response_class=HTMLResponse)
async def registration_page(request: Request):
    """Guest registration screen"""
    return templates.TemplateResponse(request, "registration.html", {
        "title": "Регистрация"
    })

@app.get("/preferences", response_class=HTMLResponse)
async def preferences_page(request: Request):
    """Food/drink selection screen"""
    return templates.TemplateResponse(request, "preferences.html", {
        "title": "Предпочтения"
    })

@app.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request):
    """Admin panel for the guest list and catalog"""
    return templates.TemplateResponse(request, "admin.html", {
        "title": "Администратор"
    })

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=int(os.getenv("PORT", "8000")),
        reload=True
    )
