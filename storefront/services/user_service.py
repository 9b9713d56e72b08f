# ============================================================================
# FILE: storefront/services/user_service.py
# ============================================================================
import re
from typing import Optional
from email_validator import validate_email, EmailNotValidError
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from storefront.db.models.user import User
from storefront.core.errors import ValidationError, ConflictError, InvalidCredentials, StorageError
from storefront.core.security import (
    BCRYPT_MAX_BYTES,
    get_password_hash,
    verify_password,
    burn_password_check,
)
import logging

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,20}$")

def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""

class UserService:
    """Credential store: registration and password checks"""
    
    def register(self, db: Session, name, email, username, password) -> int:
        """Create a user account and return its id"""
        name, email, username = _clean(name), _clean(email), _clean(username)
        if not name or not email or not username or not _clean(password):
            raise ValidationError("all fields are required")
        
        if not USERNAME_PATTERN.match(username):
            raise ValidationError(
                "Username should be 1-20 characters, using letters, numbers, _ or -."
            )
        
        try:
            # Stored lowercased so case variants hit the unique constraint
            email = validate_email(email, check_deliverability=False).normalized.lower()
        except EmailNotValidError:
            raise ValidationError("email format is wrong")
        
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValidationError("password is too long")
        
        try:
            existing = db.query(User.id).filter(
                or_(User.email == email, User.username == username)
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Error checking for existing user: {e}")
            raise StorageError(str(e)) from e
        if existing:
            raise ConflictError("User already exists")
        
        user = User(
            name=name,
            email=email,
            username=username,
            password=get_password_hash(password)
        )
        try:
            db.add(user)
            db.commit()
        except IntegrityError:
            # A concurrent registration won the race past the pre-check
            db.rollback()
            logger.info(f"Registration conflict on commit for username {username}")
            raise ConflictError("User already exists")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise StorageError(str(e)) from e
        
        logger.info(f"User registered: id={user.id}")
        return user.id
    
    def authenticate(self, db: Session, username, password) -> int:
        """Return the user id for a username/password pair.

        Unknown usernames still pay for a bcrypt check so both failure
        paths look the same from outside.
        """
        username, password = _clean(username), password if isinstance(password, str) else ""
        try:
            user = self.get_user_by_username(db, username) if username else None
        except SQLAlchemyError as e:
            logger.error(f"Error looking up user: {e}")
            raise StorageError(str(e)) from e
        
        if user is None:
            burn_password_check(password)
            raise InvalidCredentials()
        if not verify_password(password, user.password):
            raise InvalidCredentials()
        
        logger.info(f"User authenticated: id={user.id}")
        return user.id
    
    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        """Get user by id"""
        try:
            return db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading user {user_id}: {e}")
            raise StorageError(str(e)) from e
    
    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

# Create singleton instance
user_service = UserService()
