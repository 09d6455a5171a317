"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
Cart prices arrive from the catalog as JSON numbers or strings and are
normalized here before any arithmetic.
"""
import os
from decimal import Context, Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Upper bounds for a single cart line; keep totals well inside _MONEY_CONTEXT
MAX_PRICE = Decimal("10000000")
MAX_QUANTITY = 9999

_MONEY_CONTEXT = Context(prec=40)

DEFAULT_CURRENCY = os.environ.get("CURRENCY", "INR")

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round monetary value to 2 decimal places (half up)."""
    return to_decimal(value).quantize(
        MONEY_PRECISION, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT
    )


def fixed(value: Number) -> str:
    """Format with exactly two decimals and no grouping, e.g. "680.00"."""
    return f"{round_money(value):.2f}"


def plain(value: Number) -> str:
    """
    Format a price the way it was entered: 250 -> "250", 99.50 -> "99.5".

    Used for unit prices in cart lines and order messages, where the
    catalog value is shown verbatim rather than padded.
    """
    decimal_value = to_decimal(value)
    if decimal_value == decimal_value.to_integral_value():
        return str(decimal_value.to_integral_value())
    return format(decimal_value.normalize(), "f")


def currency_symbol(currency: str = DEFAULT_CURRENCY) -> str:
    """Symbol for a currency code, falling back to the code itself."""
    return CURRENCY_SYMBOLS.get(currency, currency)


def format_money(value: Number, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format monetary value with currency symbol and two decimals.

    Args:
        value: Value to format
        currency: Currency code (INR, USD, EUR, GBP)

    Returns:
        Formatted string, e.g. "₹680.00"
    """
    return f"{currency_symbol(currency)}{fixed(value)}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
