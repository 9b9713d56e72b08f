# ============================================================================
# FILE: storefront/api/dependencies.py
# ============================================================================
from fastapi import Depends, Request, Response
from storefront.config import settings
from storefront.services.session_service import SessionHandle, session_authority
from typing import Optional

def get_session(request: Request) -> SessionHandle:
    """
    Resolve the session cookie into a SessionHandle
    Missing, unknown or expired cookies give an anonymous handle
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return session_authority.load(token)

def get_current_user_id(
    session: SessionHandle = Depends(get_session)
) -> Optional[int]:
    """Current user id, or None for anonymous callers (never raises)"""
    return session_authority.current_user(session)

def require_current_user(
    session: SessionHandle = Depends(get_session)
) -> int:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    return session_authority.require_user(session)

def bind_session_cookie(response: Response, session: SessionHandle) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.token,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
