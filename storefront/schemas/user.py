# ============================================================================
# FILE: storefront/schemas/user.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class UserCreate(BaseModel):
    """Schema for user registration (checked by the credential store)"""
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    """Schema for user login"""
    username: Optional[str] = None
    password: Optional[str] = None

class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    name: str
    username: str
    email: str
    
    class Config:
        from_attributes = True

class MeResponse(BaseModel):
    isLoggedIn: bool
    name: Optional[str] = None
