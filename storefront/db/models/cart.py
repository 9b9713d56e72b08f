
# ============================================================================
# FILE: storefront/db/models/cart.py
# ============================================================================
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from storefront.db.base import Base

class CartItem(Base):
    """One row per (user, product); repeat adds bump the quantity"""
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Products belong to the catalog; joined on read, no foreign key
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    
    # Relationships
    user = relationship("User", back_populates="cart_items")
