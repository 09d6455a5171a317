"""
SBT Storefront Core Module

This package contains the storefront components:
- cart: cart store, write-through persistence, rendering, WhatsApp checkout
- db: Supabase and Upstash Redis clients
- services: catalog database facade and repositories
- routers: FastAPI routers mounted by api/index.py

Note: Imports are lazy so importing ``core.cart`` does not pull in the
router stack.
"""

__all__ = [
    "get_supabase",
    "get_redis_sync",
]


def __getattr__(name):
    """Lazy attribute access for clean serverless loading."""
    if name == "get_supabase":
        from core.db import get_supabase
        return get_supabase
    elif name == "get_redis_sync":
        from core.db import get_redis_sync
        return get_redis_sync
    raise AttributeError(f"module 'core' has no attribute '{name}'")
