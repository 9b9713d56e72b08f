# ============================================================================
# FILE: storefront/db/session.py
# ============================================================================
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from storefront.config import settings

def _engine_options(database_url: str) -> dict:
    """Bound every storage call by DB_TIMEOUT_SECONDS"""
    backend = make_url(database_url).get_backend_name()
    if backend == "sqlite":
        # Requests run in a thread pool; sqlite waits up to `timeout` on a lock
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.DB_TIMEOUT_SECONDS,
            }
        }
    if backend == "postgresql":
        return {
            "pool_pre_ping": True,
            "pool_timeout": settings.DB_TIMEOUT_SECONDS,
            "connect_args": {
                "connect_timeout": settings.DB_TIMEOUT_SECONDS,
                "options": f"-c statement_timeout={settings.DB_TIMEOUT_SECONDS * 1000}",
            },
        }
    return {"pool_timeout": settings.DB_TIMEOUT_SECONDS}

engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False)

def get_db() -> Generator[Session, None, None]:
    """Yield one database session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
