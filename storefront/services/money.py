"""
Money Utilities - Safe Decimal operations for prices.

Prices are held as Decimal quantized to cents so that totals shown to the
shopper never drift the way float accumulation does.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
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
        # Via str so 19.99 stays 19.99 and not 19.989999...
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents (half up)."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def to_cents(value: Number) -> int:
    """
    Convert a decimal amount to integer minor units.

    Args:
        value: Amount in major units (e.g., 19.99)

    Returns:
        Amount in cents (e.g., 1999)
    """
    return int((to_decimal(value) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer minor units back to a Decimal amount."""
    return round_money(Decimal(cents) / Decimal(100))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def discount_percent(original: Number, reduced: Number) -> int:
    """
    Whole-number percentage saved when `original` is reduced to `reduced`.

    Returns 0 for a non-positive original price.
    """
    original_value = to_decimal(original)
    if original_value <= 0:
        return 0
    saved = (original_value - to_decimal(reduced)) / original_value * 100
    return int(saved.to_integral_value(rounding=ROUND_HALF_UP))


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, GBP, ...)

    Returns:
        Formatted string, e.g. "$105.00" or "105.00 CHF"
    """
    formatted = f"{round_money(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{symbol}{formatted}"
    return f"{formatted} {currency}"


def to_float(value: Number) -> float:
    """
    Convert to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
