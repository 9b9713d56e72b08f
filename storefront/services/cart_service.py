# ============================================================================
# FILE: storefront/services/cart_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from storefront.db.models.cart import CartItem
from storefront.db.models.product import Product
from storefront.core.errors import ValidationError, NotFoundError, StorageError
import logging

logger = logging.getLogger(__name__)

# Ids are stored in signed 64-bit integer columns
MAX_ID = 2 ** 63 - 1

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

def parse_positive_id(value, label: str) -> int:
    """Accept an int or a string of digits greater than zero"""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        parsed = int(value.strip())
    else:
        raise ValidationError(f"Invalid {label}")
    if parsed <= 0 or parsed > MAX_ID:
        raise ValidationError(f"Invalid {label}")
    return parsed

class CartService:
    """Cart ledger: one row per (user, product) with a quantity counter"""
    
    def _upsert(self, db: Session):
        dialect = db.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect]
        except KeyError:
            raise StorageError(f"cart upsert is not supported on {dialect}")
    
    def add_item(self, db: Session, user_id: int, product_id) -> CartItem:
        """Insert the (user, product) row or bump its quantity by one.

        A single INSERT ... ON CONFLICT DO UPDATE statement, so two concurrent
        adds for the same pair can neither both insert nor lose an increment.
        """
        product_id = parse_positive_id(product_id, "product ID")
        insert = self._upsert(db)
        stmt = (
            insert(CartItem)
            .values(user_id=user_id, product_id=product_id, quantity=1)
            .on_conflict_do_update(
                index_elements=[CartItem.user_id, CartItem.product_id],
                set_={"quantity": CartItem.quantity + 1},
            )
            .returning(CartItem.id, CartItem.quantity)
        )
        try:
            row = db.execute(stmt).one()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding product {product_id} to cart of user {user_id}: {e}")
            raise StorageError(str(e)) from e
        
        # Built from the statement itself: the row may change or vanish after commit
        item = CartItem(id=row.id, user_id=user_id, product_id=product_id, quantity=row.quantity)
        logger.info(f"Cart item {item.id} for user {user_id}: product {product_id} x{item.quantity}")
        return item
    
    def count(self, db: Session, user_id: Optional[int]) -> int:
        """Total quantity in the cart; anonymous callers get 0"""
        if user_id is None:
            return 0
        try:
            total = db.execute(
                select(func.coalesce(func.sum(CartItem.quantity), 0))
                .where(CartItem.user_id == user_id)
            ).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting cart of user {user_id}: {e}")
            raise StorageError(str(e)) from e
        return int(total)
    
    def list_items(self, db: Session, user_id: int) -> List[dict]:
        """Cart rows joined with their products, in insertion order"""
        stmt = (
            select(
                CartItem.id.label("cartItemId"),
                CartItem.quantity,
                Product.title,
                Product.artist,
                Product.price,
            )
            .join(Product, Product.id == CartItem.product_id)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.id)
        )
        try:
            rows = db.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing cart of user {user_id}: {e}")
            raise StorageError(str(e)) from e
        return [dict(row) for row in rows]
    
    def remove_item(self, db: Session, user_id: int, item_id) -> None:
        """Delete one cart row owned by user_id.

        Ownership is part of the WHERE clause, so another user's row and a
        missing row are the same NotFoundError.
        """
        item_id = parse_positive_id(item_id, "item ID")
        try:
            result = db.execute(
                delete(CartItem).where(CartItem.id == item_id, CartItem.user_id == user_id)
            )
            if result.rowcount == 0:
                db.rollback()
                raise NotFoundError("Item not found")
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error removing cart item {item_id}: {e}")
            raise StorageError(str(e)) from e
        logger.info(f"Cart item {item_id} removed for user {user_id}")
    
    def clear_all(self, db: Session, user_id: int) -> int:
        """Empty the user's cart (checkout); returns the number of rows removed"""
        try:
            result = db.execute(delete(CartItem).where(CartItem.user_id == user_id))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error clearing cart of user {user_id}: {e}")
            raise StorageError(str(e)) from e
        logger.info(f"Cart cleared for user {user_id} ({result.rowcount} rows)")
        return result.rowcount

# Create singleton instance
cart_service = CartService()
