# ============================================================================
# FILE: storefront/main.py
# ============================================================================
import time
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.api.v1.router import api_router
from storefront.core.errors import StoreError, StorageError
from storefront.core.logging import setup_logging
from storefront.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Storefront backend: accounts, sessions, cart and catalog",
    version="1.0.0"
)

# CORS middleware (cookies need explicit origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
    return response

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    if isinstance(exc, StorageError):
        # Details stay in the server log
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request on {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Malformed request body"})

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info(f"Starting {settings.APP_NAME}")
    # Create database tables if they do not exist yet
    from storefront.db.base import Base, import_models
    from storefront.db.session import engine
    import_models()
    Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME}")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
