# ============================================================================
# FILE: storefront/core/logging.py
# ============================================================================
import logging
import sys
from storefront.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging() -> None:
    """Configure root logging once for the whole process"""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    # Avoid duplicate handlers when the app module is re-imported (reload, tests)
    if not any(getattr(h, "_storefront", False) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._storefront = True
        root_logger.addHandler(handler)
    
    # SQL echo is too noisy outside of debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
