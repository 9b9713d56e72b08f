# ============================================================================
# FILE: storefront/api/v1/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from storefront.db.session import get_db
from storefront.api.dependencies import get_session, bind_session_cookie, clear_session_cookie
from storefront.core.errors import StorageError, ValidationError
from storefront.schemas.user import UserCreate, UserLogin, UserResponse
from storefront.services.user_service import user_service
from storefront.services.session_service import SessionHandle, session_authority
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    response: Response,
    db: Session = Depends(get_db),
    session: SessionHandle = Depends(get_session)
):
    """
    Register a new user account
    The new user is logged in straight away
    """
    user_id = user_service.register(
        db,
        name=user_data.name,
        email=user_data.email,
        username=user_data.username,
        password=user_data.password,
    )
    bind_session_cookie(response, session_authority.start(session, user_id))
    return user_service.get_user(db, user_id)

@router.post("/login")
def login(
    credentials: UserLogin,
    response: Response,
    db: Session = Depends(get_db),
    session: SessionHandle = Depends(get_session)
):
    """
    Login with username and password
    Binds the session cookie to the user
    """
    if not credentials.username or not credentials.password:
        raise ValidationError("username and password are required")
    
    user_id = user_service.authenticate(db, credentials.username, credentials.password)
    bind_session_cookie(response, session_authority.start(session, user_id))
    return {"message": "Logged in"}

@router.get("/logout")
def logout(session: SessionHandle = Depends(get_session)):
    """Destroy the caller's session (no-op when there is none)"""
    try:
        session_authority.destroy(session)
    except StorageError as e:
        logger.error(f"Logout failed: {e.message}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Failed to log out"})
    
    response = JSONResponse(content={"message": "Logged out"})
    clear_session_cookie(response)
    return response
