# ============================================================================
# FILE: storefront/api/v1/endpoints/me.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from storefront.db.session import get_db
from storefront.api.dependencies import get_current_user_id
from storefront.schemas.user import MeResponse
from storefront.services.user_service import user_service

router = APIRouter()

@router.get("", response_model=MeResponse, response_model_exclude_none=True)
def get_current_user_info(
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id)
):
    """
    Who am I: works for anonymous callers too
    """
    if user_id is None:
        return MeResponse(isLoggedIn=False)
    
    user = user_service.get_user(db, user_id)
    if user is None:
        return MeResponse(isLoggedIn=False)
    return MeResponse(isLoggedIn=True, name=user.name)
