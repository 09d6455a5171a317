"""
Cart Router

Cart endpoints for the storefront. Handlers are plain functions so the
blocking cart storage runs in FastAPI's threadpool.

Every mutation returns the freshly rendered cart:
- items: index, name, image_ref, unit_price, quantity, subtotal
- count: total units
- total: formatted grand total
"""
from fastapi import APIRouter, Depends, HTTPException

from core.cart import CartManager
from core.errors import CartEmptyError
from core.logging import get_logger, sanitize_string_for_logging
from .deps import get_cart_manager
from .models import AddToCartRequest, ChangeQuantityRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("")
def get_cart(cart: CartManager = Depends(get_cart_manager)):
    """Current cart (also used when the cart panel opens)."""
    return cart.view().to_dict()


@router.get("/count")
def get_cart_count(cart: CartManager = Depends(get_cart_manager)):
    """Badge count without decoding the stored line items."""
    return {"count": cart.count()}


@router.post("/items")
def add_to_cart(request: AddToCartRequest, cart: CartManager = Depends(get_cart_manager)):
    """Add one unit of a catalog product."""
    view = cart.add_item(request.name, request.price, request.image_ref)
    logger.info(f"Added to cart: {sanitize_string_for_logging(request.name)} (count={view.count})")
    return view.to_dict()


@router.patch("/items/{index}")
def change_quantity(
    index: int,
    request: ChangeQuantityRequest,
    cart: CartManager = Depends(get_cart_manager),
):
    """Step a line's quantity up or down; stale indexes are ignored."""
    return cart.change_quantity(index, request.delta).to_dict()


@router.delete("/items/{index}")
def remove_from_cart(index: int, cart: CartManager = Depends(get_cart_manager)):
    """Remove a line; stale indexes are ignored."""
    return cart.remove_item(index).to_dict()


@router.delete("")
def clear_cart(cart: CartManager = Depends(get_cart_manager)):
    return cart.clear().to_dict()


@router.post("/checkout")
def checkout(cart: CartManager = Depends(get_cart_manager)):
    """Build the WhatsApp order link for the current cart."""
    try:
        link = cart.checkout()
    except CartEmptyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return link.to_dict()
