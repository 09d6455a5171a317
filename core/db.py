"""
Database Module - Supabase and Redis Clients

Provides singleton instances of:
- Async Supabase client for the catalog (categories, products)
- Sync Upstash Redis client for cart storage
"""

import os
from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client
from upstash_redis import Redis


SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


_async_supabase_client: Optional[AsyncClient] = None
_sync_redis_client: Optional[Redis] = None


async def get_supabase() -> AsyncClient:
    """Get async Supabase client (singleton)."""
    global _async_supabase_client

    if _async_supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _async_supabase_client


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Cart handlers run in FastAPI's threadpool, so the blocking client is
    the right fit there.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _sync_redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    CART = "cart:"  # cart:{profile}:{field}

    @staticmethod
    def cart_key(profile: str, field: str) -> str:
        return f"{RedisKeys.CART}{profile}:{field}"


class TTL:
    """Time-to-live constants for Redis keys (seconds)."""

    CART = 2592000  # 30 days, refreshed on every write
