"""
WhatsApp checkout hand-off.

Turns a cart snapshot into an order message and a ``whatsapp://`` deep
link. Sending is left to the WhatsApp client that opens the link; nothing
here can observe whether the message was actually sent.
"""
from dataclasses import dataclass
from urllib.parse import quote

from core.errors import CartEmptyError
from core.logging import get_logger
from core.services.money import DEFAULT_CURRENCY, currency_symbol, fixed, plain
from .models import CartSnapshot

logger = get_logger(__name__)

DEFAULT_PHONE = "916380944811"
DEFAULT_SCHEME = "whatsapp"

GREETING = "Hello, I would like to order the following items:"
CLOSING = "Please confirm the order. Thank you!"

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class CheckoutLink:
    url: str
    message: str
    total: str

    def to_dict(self) -> dict:
        return {"url": self.url, "message": self.message, "total": self.total}


class CheckoutDispatcher:
    """Formats orders for a fixed WhatsApp destination."""

    def __init__(
        self,
        phone: str = DEFAULT_PHONE,
        scheme: str = DEFAULT_SCHEME,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.phone = phone
        self.scheme = scheme
        self.currency = currency

    def compose_message(self, snapshot: CartSnapshot) -> str:
        """Order text: one block per line item, then the grand total."""
        symbol = currency_symbol(self.currency)
        blocks = [GREETING, ""]
        for item in snapshot.items:
            blocks.append(
                f"🔹 *{item.name}*\n"
                f"    Quantity: {item.quantity}\n"
                f"    Price: {symbol}{plain(item.price)}\n"
                f"    Total: {symbol}{fixed(item.subtotal)}\n"
            )
        blocks.append(f"*Grand Total: {symbol}{fixed(snapshot.total_amount)}*\n")
        blocks.append(CLOSING)
        return "\n".join(blocks)

    def build_url(self, message: str) -> str:
        text = quote(message, safe=_URI_COMPONENT_SAFE)
        return f"{self.scheme}://send?phone={self.phone}&text={text}"

    def dispatch(self, snapshot: CartSnapshot) -> CheckoutLink:
        """
        Produce the deep link for ``snapshot``.

        Raises:
            CartEmptyError: If the snapshot has no line items
        """
        if snapshot.is_empty:
            raise CartEmptyError()

        message = self.compose_message(snapshot)
        total = fixed(snapshot.total_amount)
        logger.info(f"Checkout link built: {len(snapshot)} lines, total {total}")
        return CheckoutLink(url=self.build_url(message), message=message, total=total)
