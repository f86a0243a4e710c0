"""
Money Utilities - Safe Decimal operations for prices.

Prices arrive from PostgREST as JSON numbers or numeric strings;
everything is normalized to Decimal before it reaches the cart.
The storefront only sells in USD.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

Numeric = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")


def _parse(value: Union[Numeric, None]) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            # Go through str so 0.1 stays 0.1
            return Decimal(str(value))
        if isinstance(value, str):
            return Decimal(value.strip())
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None


def to_decimal(value: Union[Numeric, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    parsed = _parse(value)
    return parsed if parsed is not None else Decimal("0")


def to_price(value: Union[Numeric, None]) -> Optional[Decimal]:
    """
    Like to_decimal, but anything that is not a finite number is None.

    A price of "abc" leaves the product unpriced, not free.
    """
    parsed = _parse(value)
    if parsed is None or not parsed.is_finite():
        return None
    return parsed


def round_money(value: Numeric) -> Decimal:
    """Round monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Numeric, factor: Numeric) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_amount(value: Numeric) -> str:
    """Plain two-decimal amount, e.g. ``1234.5`` -> ``"1234.50"``."""
    return f"{round_money(value):.2f}"


def format_usd(value: Numeric) -> str:
    """Dollar amount with thousands separators, e.g. ``"$1,234.00"``."""
    return f"${round_money(value):,.2f}"
