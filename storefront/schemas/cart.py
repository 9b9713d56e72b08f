# ============================================================================
# FILE: storefront/schemas/cart.py
# ============================================================================
from pydantic import BaseModel
from typing import Any, List

class CartAdd(BaseModel):
    """Schema for adding a product to the cart"""
    # Parsed by the cart ledger so a bad value is a 400, not a 422
    productId: Any = None

class CartItemResponse(BaseModel):
    id: int
    productId: int
    quantity: int

class CartAddResponse(BaseModel):
    message: str
    item: CartItemResponse

class CartLine(BaseModel):
    """A cart row joined with its product"""
    cartItemId: int
    quantity: int
    title: str
    artist: str
    price: float

class CartListResponse(BaseModel):
    items: List[CartLine] = []

class CartCountResponse(BaseModel):
    totalItems: int
