# ============================================================================
# FILE: storefront/schemas/product.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class ProductResponse(BaseModel):
    """Schema for catalog product response"""
    id: int
    title: str
    artist: str
    price: float
    image: str
    year: Optional[int] = None
    genre: Optional[str] = None
    stock: Optional[int] = None
    
    class Config:
        from_attributes = True
