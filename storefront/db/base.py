# ============================================================================
# FILE: storefront/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import models so Base.metadata knows every table before create_all
def import_models():
    from storefront.db.models import user, cart, product  # noqa: F401
