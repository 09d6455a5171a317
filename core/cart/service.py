"""Cart manager: the event adapter between HTTP handlers and the cart store."""
from typing import Optional

from core.logging import get_logger
from core.services.money import Number
from .checkout import CheckoutDispatcher, CheckoutLink
from .persistence import CartPersistence
from .render import CartRenderer, CartView
from .storage import KeyValueStorage
from .store import CartStore

logger = get_logger(__name__)


class CartManager:
    """
    Wires a cart store to its collaborators for one profile.

    Every event mutates the store first (which persists through the bound
    ``CartPersistence``) and then renders the new state.

    Usage:
        manager = CartManager.open(ProfileStorage(backend, profile))
        view = manager.add_item("Rice 5kg", 250, "https://cdn/rice.jpg")
        link = manager.checkout()
    """

    def __init__(
        self,
        store: CartStore,
        persistence: CartPersistence,
        renderer: Optional[CartRenderer] = None,
        dispatcher: Optional[CheckoutDispatcher] = None,
    ):
        self.store = store
        self.persistence = persistence
        self.renderer = renderer or CartRenderer()
        self.dispatcher = dispatcher or CheckoutDispatcher()

    @classmethod
    def open(
        cls,
        storage: KeyValueStorage,
        renderer: Optional[CartRenderer] = None,
        dispatcher: Optional[CheckoutDispatcher] = None,
    ) -> "CartManager":
        """Hydrate a store from ``storage`` and bind write-through persistence."""
        persistence = CartPersistence(storage)
        store = CartStore(persistence.load().items)
        persistence.bind(store)
        return cls(store, persistence, renderer, dispatcher)

    def view(self) -> CartView:
        return self.renderer.render(self.store.snapshot())

    def count(self) -> int:
        """Badge count from the stored count key."""
        return self.persistence.peek_count()

    def add_item(self, name: str, price: Number, image_ref: str = "") -> CartView:
        self.store.add_item(name, price, image_ref)
        return self.view()

    def change_quantity(self, index: int, delta: int) -> CartView:
        self.store.change_quantity(index, delta)
        return self.view()

    def remove_item(self, index: int) -> CartView:
        self.store.remove_item(index)
        return self.view()

    def clear(self) -> CartView:
        self.store.clear()
        self.persistence.clear()
        logger.info("Cart cleared")
        return self.view()

    def checkout(self) -> CheckoutLink:
        """
        Build the WhatsApp hand-off for the current cart.

        Raises:
            CartEmptyError: If the cart has no line items
        """
        return self.dispatcher.dispatch(self.store.snapshot())
