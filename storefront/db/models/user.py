
# ============================================================================
# FILE: storefront/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from storefront.db.base import Base

class User(Base):
    """Registered customer"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String(20), unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never the raw password
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    cart_items = relationship("CartItem", back_populates="user")
