"""Database Models - Pydantic models for catalog entities."""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from core.services.money import to_decimal as _to_decimal


class Category(BaseModel):
    """Product category shown as a filter button."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    image_url: Optional[str] = None


class Product(BaseModel):
    """Catalog product."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: Optional[str] = None
    price: Decimal
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[Category] = None  # embedded when the query joins categories

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)
