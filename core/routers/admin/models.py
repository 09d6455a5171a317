"""
Admin API Pydantic Models
"""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


# ==================== CATEGORY MODELS ====================

class CreateCategoryRequest(BaseModel):
    name: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)  # already hosted


class UpdateCategoryRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = Field(None, min_length=1)


# ==================== PRODUCT MODELS ====================

class CreateProductRequest(BaseModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    image_url: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    description: Optional[str] = None


class UpdateProductRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, min_length=1)
    category_id: Optional[str] = None
    description: Optional[str] = None
