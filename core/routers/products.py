"""
Catalog API Router

Public endpoints for categories and products.
"""

from typing import Optional
from fastapi import APIRouter, HTTPException

from core.errors import (
    ERROR_CATEGORY_FETCH_FAILED,
    ERROR_CATEGORY_NOT_FOUND,
    ERROR_PRODUCT_FETCH_FAILED,
    ERROR_PRODUCT_NOT_FOUND,
)
from core.logging import get_logger, sanitize_id_for_logging
from core.services.database import get_database
from core.services.models import Category, Product
from core.services.money import to_float

logger = get_logger(__name__)

router = APIRouter(tags=["catalog"])


def category_payload(category: Category) -> dict:
    return {
        "id": category.id,
        "name": category.name,
        "image_url": category.image_url,
    }


def product_payload(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description or "",
        "price": to_float(product.price),
        "category_id": product.category_id,
        "category": category_payload(product.category) if product.category else None,
        "image_url": product.image_url,
    }


# ==================== CATEGORIES ====================

@router.get("/api/categories")
async def get_categories():
    """All categories, used to build the filter buttons."""
    db = get_database()
    try:
        categories = await db.get_categories()
    except Exception as e:
        logger.error(f"Fetch categories failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CATEGORY_FETCH_FAILED)
    return [category_payload(c) for c in categories]


@router.get("/api/categories/{category_id}")
async def get_category(category_id: str):
    db = get_database()
    try:
        category = await db.get_category_by_id(category_id)
    except Exception as e:
        logger.error(
            f"Fetch category {sanitize_id_for_logging(category_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_CATEGORY_FETCH_FAILED)

    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return category_payload(category)


# ==================== PRODUCTS ====================

@router.get("/api/products")
async def get_products(category: Optional[str] = None):
    """All products, or only those in ``category`` when given."""
    db = get_database()
    try:
        products = await db.get_products(category_id=category or None)
    except Exception as e:
        logger.error(f"Fetch products failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_PRODUCT_FETCH_FAILED)
    return [product_payload(p) for p in products]


@router.get("/api/products/{product_id}")
async def get_product(product_id: str):
    db = get_database()
    try:
        product = await db.get_product_by_id(product_id)
    except Exception as e:
        logger.error(
            f"Fetch product {sanitize_id_for_logging(product_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_PRODUCT_FETCH_FAILED)

    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product_payload(product)
