"""
Cart API Pydantic Models
"""
from decimal import Decimal
from pydantic import BaseModel, Field

from core.services.money import MAX_PRICE, MAX_QUANTITY


class AddToCartRequest(BaseModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, le=MAX_PRICE)
    image_ref: str = ""


class ChangeQuantityRequest(BaseModel):
    # Signed; the line is removed once quantity reaches 0
    delta: int = Field(..., ge=-MAX_QUANTITY, le=MAX_QUANTITY)
