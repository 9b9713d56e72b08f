
# ============================================================================
# FILE: storefront/db/models/product.py
# ============================================================================
from sqlalchemy import Column, Integer, String, Float

from storefront.db.base import Base

class Product(Base):
    """Catalog entry (read-only for this service)"""
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String, nullable=False)
    year = Column(Integer, nullable=True)
    genre = Column(String, nullable=True, index=True)
    stock = Column(Integer, nullable=True)
