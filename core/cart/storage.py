"""Key-value slots for cart persistence."""
import threading
from typing import Dict, Optional, Protocol

from core.db import RedisKeys, TTL, get_redis_sync


class KeyValueStorage(Protocol):
    """The get/set(string) contract cart persistence relies on."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, *keys: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage for development and tests."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class RedisStorage:
    """Upstash Redis backed storage; every write refreshes the cart TTL."""

    def __init__(self, redis=None, ttl: int = TTL.CART):
        self._redis = redis
        self._ttl = ttl

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def get(self, key: str) -> Optional[str]:
        value = self.redis.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self.redis.set(key, value, ex=self._ttl)

    def delete(self, *keys: str) -> None:
        if keys:
            self.redis.delete(*keys)


class ProfileStorage:
    """
    Scopes a shared backend to one browser profile.

    ``cartItems`` for profile ``abc`` is stored as ``cart:abc:cartItems``.
    """

    def __init__(self, backend: KeyValueStorage, profile: str):
        self.backend = backend
        self.profile = profile

    def _key(self, key: str) -> str:
        return RedisKeys.cart_key(self.profile, key)

    def get(self, key: str) -> Optional[str]:
        return self.backend.get(self._key(key))

    def set(self, key: str, value: str) -> None:
        self.backend.set(self._key(key), value)

    def delete(self, *keys: str) -> None:
        self.backend.delete(*(self._key(key) for key in keys))
