"""Cart package: models, store, persistence, rendering, checkout, and manager facade."""
from .models import CartLineItem, CartSnapshot, EMPTY_CART
from .store import CartStore
from .storage import KeyValueStorage, MemoryStorage, RedisStorage, ProfileStorage
from .persistence import CartPersistence, ITEMS_KEY, COUNT_KEY
from .render import CartRenderer, CartView, CartLineView
from .checkout import CheckoutDispatcher, CheckoutLink
from .service import CartManager

__all__ = [
    "CartLineItem",
    "CartSnapshot",
    "EMPTY_CART",
    "CartStore",
    "KeyValueStorage",
    "MemoryStorage",
    "RedisStorage",
    "ProfileStorage",
    "CartPersistence",
    "ITEMS_KEY",
    "COUNT_KEY",
    "CartRenderer",
    "CartView",
    "CartLineView",
    "CheckoutDispatcher",
    "CheckoutLink",
    "CartManager",
]
