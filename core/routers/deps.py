"""
Shared Dependencies for Routers

Cart storage is a lazy singleton; cart managers are built per request for
the caller's profile and never shared.
"""

import os
import re
import secrets
from typing import Optional

from fastapi import Depends, Request, Response

from core.cart import (
    CartManager,
    CheckoutDispatcher,
    KeyValueStorage,
    MemoryStorage,
    ProfileStorage,
    RedisStorage,
)
from core.cart.checkout import DEFAULT_PHONE, DEFAULT_SCHEME
from core.db import TTL
from core.logging import get_logger

logger = get_logger(__name__)

CART_STORAGE_BACKEND = os.environ.get("CART_STORAGE_BACKEND", "redis").lower()
WHATSAPP_PHONE = os.environ.get("WHATSAPP_PHONE", DEFAULT_PHONE)
WHATSAPP_SCHEME = os.environ.get("WHATSAPP_SCHEME", DEFAULT_SCHEME)

CART_COOKIE = "cart_profile"
_PROFILE_PATTERN = re.compile(r"^[A-Za-z0-9_-]{16,64}$")


# ==================== LAZY SINGLETONS ====================

_cart_storage: Optional[KeyValueStorage] = None


def get_cart_storage() -> KeyValueStorage:
    """Get or create the shared cart storage backend."""
    global _cart_storage
    if _cart_storage is None:
        if CART_STORAGE_BACKEND == "memory":
            logger.warning("Cart storage is process-local memory; carts will not survive restarts")
            _cart_storage = MemoryStorage()
        elif CART_STORAGE_BACKEND == "redis":
            _cart_storage = RedisStorage()
        else:
            raise ValueError(f"Unknown CART_STORAGE_BACKEND: {CART_STORAGE_BACKEND}")
    return _cart_storage


# ==================== CART DEPENDENCIES ====================

def get_cart_profile(request: Request, response: Response) -> str:
    """Read the profile cookie, issuing a fresh one when absent or malformed."""
    profile = request.cookies.get(CART_COOKIE)
    if profile and _PROFILE_PATTERN.match(profile):
        return profile

    profile = secrets.token_urlsafe(16)
    response.set_cookie(
        CART_COOKIE,
        profile,
        max_age=TTL.CART,
        httponly=True,
        samesite="lax",
    )
    return profile


def get_checkout_dispatcher() -> CheckoutDispatcher:
    return CheckoutDispatcher(phone=WHATSAPP_PHONE, scheme=WHATSAPP_SCHEME)


def get_cart_manager(
    profile: str = Depends(get_cart_profile),
    storage: KeyValueStorage = Depends(get_cart_storage),
    dispatcher: CheckoutDispatcher = Depends(get_checkout_dispatcher),
) -> CartManager:
    """Open the caller's cart, hydrated from storage."""
    return CartManager.open(ProfileStorage(storage, profile), dispatcher=dispatcher)
