# ============================================================================
# FILE: storefront/core/errors.py
# ============================================================================
"""
Error taxonomy shared by the services.

Services raise these; ``storefront.main`` renders them as
``{"error": message}`` with the matching status code.
"""
from fastapi import status


class StoreError(Exception):
    """Base class for errors that map onto an HTTP response"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class ConflictError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class Unauthorized(StoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "unauthorized"


class InvalidCredentials(StoreError):
    """Login failed; never says whether the username or the password was wrong"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password"


class NotFoundError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Item not found"


class StorageError(StoreError):
    """Persistence failure. The message is for the server log only."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage failure"
    public_message = "Internal server error"
