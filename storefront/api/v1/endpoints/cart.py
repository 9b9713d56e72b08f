# ============================================================================
# FILE: storefront/api/v1/endpoints/cart.py
# ============================================================================
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from storefront.db.session import get_db
from storefront.api.dependencies import require_current_user, get_current_user_id
from storefront.schemas.cart import (
    CartAdd,
    CartAddResponse,
    CartItemResponse,
    CartListResponse,
    CartCountResponse
)
from storefront.services.cart_service import cart_service

router = APIRouter()

@router.post("/add", response_model=CartAddResponse)
def add_to_cart(
    payload: CartAdd,
    db: Session = Depends(get_db),
    user_id: int = Depends(require_current_user)
):
    """
    Add one unit of a product to the cart
    Requires authentication
    """
    item = cart_service.add_item(db, user_id, payload.productId)
    return CartAddResponse(
        message="Added to cart",
        item=CartItemResponse(id=item.id, productId=item.product_id, quantity=item.quantity),
    )

@router.get("/cart-count", response_model=CartCountResponse)
def get_cart_count(
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id)
):
    """Total quantity in the cart; 0 for anonymous callers"""
    return CartCountResponse(totalItems=cart_service.count(db, user_id))

@router.get("", response_model=CartListResponse)
def get_cart(
    db: Session = Depends(get_db),
    user_id: int = Depends(require_current_user)
):
    """
    List cart rows with product title, artist and price
    Requires authentication
    """
    return CartListResponse(items=cart_service.list_items(db, user_id))

# Must be registered before /{item_id} or "all" is taken as an item id
@router.delete("/all", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    db: Session = Depends(get_db),
    user_id: int = Depends(require_current_user)
):
    """Checkout: remove every item from the cart"""
    cart_service.clear_all(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cart_item(
    item_id: str,
    db: Session = Depends(get_db),
    user_id: int = Depends(require_current_user)
):
    """
    Remove one cart row
    Requires authentication and ownership
    """
    cart_service.remove_item(db, user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
