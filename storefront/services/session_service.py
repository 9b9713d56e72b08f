# ============================================================================
# FILE: storefront/services/session_service.py
# ============================================================================
"""
Session authority.

A client's session is an explicit ``SessionHandle`` value: the opaque token
from its cookie plus the user id the store has bound to it. Handlers receive
the handle as a dependency and pass it into the operations below, so nothing
here reads request state.
"""
from dataclasses import dataclass
from typing import Optional
from storefront.config import settings
from storefront.core.errors import Unauthorized
from storefront.core.security import new_session_token
from storefront.core.session_store import build_session_store
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SessionHandle:
    token: Optional[str] = None
    user_id: Optional[int] = None
    
    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

ANONYMOUS = SessionHandle()

class SessionAuthority:
    """Issues, resolves and destroys session bindings"""
    
    def __init__(self, store, ttl_seconds: int = None):
        self.store = store
        self.ttl_seconds = ttl_seconds or settings.SESSION_TTL_SECONDS
    
    def load(self, token: Optional[str]) -> SessionHandle:
        """Resolve a cookie token; unknown or expired tokens are anonymous"""
        if not token:
            return ANONYMOUS
        user_id = self.store.get(token)
        if user_id is None:
            return ANONYMOUS
        return SessionHandle(token=token, user_id=user_id)
    
    def start(self, handle: SessionHandle, user_id: int) -> SessionHandle:
        """Bind a fresh token to user_id, dropping whatever the client had before"""
        if handle.token:
            self.store.delete(handle.token)
        token = new_session_token()
        self.store.put(token, user_id, self.ttl_seconds)
        logger.info(f"Session started for user {user_id}")
        return SessionHandle(token=token, user_id=user_id)
    
    def current_user(self, handle: SessionHandle) -> Optional[int]:
        return handle.user_id
    
    def require_user(self, handle: SessionHandle) -> int:
        """Return the bound user id or raise Unauthorized"""
        if handle.user_id is None:
            logger.warning("access has been blocked: no session")
            raise Unauthorized()
        return handle.user_id
    
    def destroy(self, handle: SessionHandle) -> SessionHandle:
        """Tear down the binding. Store failures propagate as StorageError."""
        if handle.token:
            self.store.delete(handle.token)
            if handle.user_id is not None:
                logger.info(f"Session destroyed for user {handle.user_id}")
        return ANONYMOUS

# Create singleton instance
session_authority = SessionAuthority(build_session_store())
