# ============================================================================
# FILE: storefront/core/security.py
# ============================================================================
import secrets
from functools import lru_cache
import bcrypt
from storefront.config import settings

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72

def get_password_hash(password: str) -> str:
    """Hash a password with a fresh salt"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash"""
    password_bytes = plain_password.encode("utf-8")
    too_long = len(password_bytes) > BCRYPT_MAX_BYTES
    matched = bcrypt.checkpw(password_bytes[:BCRYPT_MAX_BYTES], hashed_password.encode("utf-8"))
    # Registration rejects longer passwords, so a truncated match is not a match
    return matched and not too_long

@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash(secrets.token_urlsafe(16))

def burn_password_check(plain_password: str) -> None:
    """Run a full-cost bcrypt check against a throwaway hash.

    Used when the username is unknown so that failed logins take the same
    time whichever field was wrong.
    """
    verify_password(plain_password, _dummy_hash())

def new_session_token() -> str:
    return secrets.token_urlsafe(32)
