# ============================================================================
# FILE: storefront/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "Storefront API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"
    
    # Database
    DATABASE_URL: str = "sqlite:///./database.db"  # Change to PostgreSQL in production
    DB_TIMEOUT_SECONDS: int = 15
    
    # Redis (used when SESSION_BACKEND == "redis")
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_TIMEOUT_SECONDS: float = 5.0
    
    # Sessions
    SESSION_BACKEND: str = "memory"  # "memory" or "redis"
    SESSION_COOKIE_NAME: str = "storefront_session"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_TTL_SECONDS: int = 60 * 60 * 24
    
    # Security
    BCRYPT_ROUNDS: int = 12
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
