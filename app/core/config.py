"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./birthday.db")
    
    # Security
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "birthday2024")
    ADMIN_COOKIE_NAME: str = "adminSession"
    ADMIN_COOKIE_VALUE: str = "authenticated"
    ADMIN_SESSION_MAX_AGE: int = 60 * 60  # 1 hour
    GUEST_COOKIE_NAME: str = "guestSession"
    GUEST_SESSION_MAX_AGE: int = 24 * 60 * 60  # 24 hours
    
    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]
    
    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 30
    
    # Catalog defaults, seeded into empty tables on startup
    DEFAULT_FOODS: List[str] = [
        "Пицца",
        "Салат",
        "Паста",
        "Суши",
        "Блинчики",
        "Торт",
        "Фрукты",
    ]
    DEFAULT_DRINKS: List[str] = [
        "Сок",
        "Вода",
        "Газировка",
        "Компот",
        "Чай",
        "Кофе",
        "Молоко",
    ]
    
    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
