# ============================================================================
# FILE: storefront/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from storefront.api.v1.endpoints import auth, me, cart, products

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(me.router, prefix="/me", tags=["me"])
api_router.include_router(cart.router, prefix="/cart", tags=["cart"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
