# ============================================================================
# FILE: storefront/core/session_store.py
# Server-side session bindings: token -> user id
# ============================================================================
import threading
import time
from typing import Dict, Optional, Tuple
import redis
from storefront.config import settings
from storefront.core.errors import StorageError
import logging

logger = logging.getLogger(__name__)

class MemorySessionStore:
    """In-process session store with expiry (single worker only)"""
    
    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, Tuple[int, float]] = {}
    
    def get(self, token: str) -> Optional[int]:
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= self._clock():
                del self._sessions[token]
                return None
            return user_id
    
    def put(self, token: str, user_id: int, ttl: int) -> None:
        with self._lock:
            self._sessions[token] = (user_id, self._clock() + ttl)
    
    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)


class RedisSessionStore:
    """Redis-backed session store; keys expire on their own via SETEX"""
    
    key_prefix = "session:"
    
    def __init__(self, redis_client=None):
        self.redis_client = redis_client or redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=settings.REDIS_TIMEOUT_SECONDS,
            socket_connect_timeout=settings.REDIS_TIMEOUT_SECONDS,
        )
    
    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{token}"
    
    def get(self, token: str) -> Optional[int]:
        try:
            value = self.redis_client.get(self._key(token))
        except redis.RedisError as e:
            logger.error(f"Session get error: {e}")
            raise StorageError("session lookup failed") from e
        if value is None:
            return None
        return int(value)
    
    def put(self, token: str, user_id: int, ttl: int) -> None:
        try:
            self.redis_client.setex(self._key(token), ttl, str(user_id))
        except redis.RedisError as e:
            logger.error(f"Session set error: {e}")
            raise StorageError("session write failed") from e
    
    def delete(self, token: str) -> None:
        try:
            self.redis_client.delete(self._key(token))
        except redis.RedisError as e:
            logger.error(f"Session delete error: {e}")
            raise StorageError("session teardown failed") from e


def build_session_store(backend: str = None):
    """Pick the session store named by SESSION_BACKEND"""
    backend = (backend or settings.SESSION_BACKEND).lower()
    if backend == "redis":
        logger.info("Using Redis session store")
        return RedisSessionStore()
    if backend == "memory":
        return MemorySessionStore()
    raise ValueError(f"Unknown SESSION_BACKEND: {backend}")
