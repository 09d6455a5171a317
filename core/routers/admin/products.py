"""
Admin Catalog Router

Category and product management endpoints. Images are uploaded elsewhere;
requests carry the hosted ``image_url``.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.auth import verify_admin
from core.errors import (
    ERROR_CATEGORY_NOT_FOUND,
    ERROR_CATEGORY_SAVE_FAILED,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PRODUCT_SAVE_FAILED,
)
from core.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from core.routers.products import category_payload, product_payload
from core.services.database import get_database
from core.services.money import to_float
from .models import (
    CreateCategoryRequest,
    CreateProductRequest,
    UpdateCategoryRequest,
    UpdateProductRequest,
)

logger = get_logger(__name__)

router = APIRouter(tags=["admin-catalog"])


def _changes(request: BaseModel) -> dict:
    """Fields the caller actually sent, JSON-ready."""
    data = request.model_dump(exclude_none=True)
    if data.get("price") is not None:
        data["price"] = to_float(data["price"])
    if not data:
        raise HTTPException(status_code=400, detail="No fields to update")
    return data


# ==================== CATEGORIES ====================

@router.post("/categories", status_code=201)
async def admin_create_category(request: CreateCategoryRequest, admin=Depends(verify_admin)):
    db = get_database()
    try:
        category = await db.create_category(request.name, request.image_url)
    except Exception as e:
        logger.error(f"Add category failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CATEGORY_SAVE_FAILED)

    logger.info(f"Category added: {sanitize_string_for_logging(category.name)}")
    return {"message": "Category added successfully", "category": category_payload(category)}


@router.put("/categories/{category_id}")
async def admin_update_category(
    category_id: str, request: UpdateCategoryRequest, admin=Depends(verify_admin)
):
    changes = _changes(request)
    db = get_database()
    try:
        category = await db.update_category(category_id, changes)
    except Exception as e:
        logger.error(
            f"Update category {sanitize_id_for_logging(category_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_CATEGORY_SAVE_FAILED)

    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {"message": "Category updated successfully", "category": category_payload(category)}


@router.delete("/categories/{category_id}")
async def admin_delete_category(category_id: str, admin=Depends(verify_admin)):
    db = get_database()
    try:
        deleted = await db.delete_category(category_id)
    except Exception as e:
        logger.error(
            f"Delete category {sanitize_id_for_logging(category_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_CATEGORY_SAVE_FAILED)

    if not deleted:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {"message": "Category removed successfully"}


# ==================== PRODUCTS ====================

@router.post("/products", status_code=201)
async def admin_create_product(request: CreateProductRequest, admin=Depends(verify_admin)):
    db = get_database()
    data = request.model_dump()
    data["price"] = to_float(request.price)
    try:
        product = await db.create_product(data)
    except Exception as e:
        logger.error(f"Add product failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_PRODUCT_SAVE_FAILED)

    logger.info(f"Product added: {sanitize_string_for_logging(product.name)}")
    return {"message": "Product added successfully", "product": product_payload(product)}


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str, request: UpdateProductRequest, admin=Depends(verify_admin)
):
    changes = _changes(request)
    db = get_database()
    try:
        product = await db.update_product(product_id, changes)
    except Exception as e:
        logger.error(
            f"Update product {sanitize_id_for_logging(product_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_PRODUCT_SAVE_FAILED)

    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"message": "Product updated successfully", "product": product_payload(product)}


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: str, admin=Depends(verify_admin)):
    db = get_database()
    try:
        deleted = await db.delete_product(product_id)
    except Exception as e:
        logger.error(
            f"Delete product {sanitize_id_for_logging(product_id)} failed: {e}", exc_info=True
        )
        raise HTTPException(status_code=500, detail=ERROR_PRODUCT_SAVE_FAILED)

    if not deleted:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"message": "Product removed successfully"}
