# ============================================================================
# FILE: storefront/services/catalog_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from storefront.db.models.product import Product
from storefront.core.errors import StorageError
import logging

logger = logging.getLogger(__name__)

class CatalogService:
    """Read-only product queries"""
    
    def list_products(self, db: Session, genre: Optional[str] = None, search: Optional[str] = None) -> List[Product]:
        """
        Filter the catalog by exact genre and/or a search term

        Args:
            genre: exact genre from the drop-down
            search: substring matched against title and artist, and also
                genre when no genre filter is given
        """
        query = db.query(Product)
        if genre:
            query = query.filter(Product.genre == genre)
        if search:
            pattern = f"%{search}%"
            fields = [Product.title.like(pattern), Product.artist.like(pattern)]
            if not genre:
                fields.append(Product.genre.like(pattern))
            query = query.filter(or_(*fields))
        try:
            return query.order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching products: {e}")
            raise StorageError(str(e)) from e
    
    def list_genres(self, db: Session) -> List[str]:
        """Distinct genres present in the catalog"""
        try:
            rows = db.query(Product.genre).filter(Product.genre.isnot(None)).distinct().order_by(Product.genre).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching genres: {e}")
            raise StorageError(str(e)) from e
        return [row.genre for row in rows]

# Create singleton instance
catalog_service = CatalogService()
