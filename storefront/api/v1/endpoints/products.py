# ============================================================================
# FILE: storefront/api/v1/endpoints/products.py
# ============================================================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront.db.session import get_db
from storefront.schemas.product import ProductResponse
from storefront.services.catalog_service import catalog_service

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
def get_products(
    genre: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Browse the catalog, optionally by genre and/or search term
    """
    return catalog_service.list_products(db, genre=genre, search=search)

@router.get("/genres", response_model=List[str])
def get_genres(db: Session = Depends(get_db)):
    """Distinct genres for the filter drop-down"""
    return catalog_service.list_genres(db)
