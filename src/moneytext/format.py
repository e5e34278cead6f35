"""Shared amount formatting utility.

Used by Amount.string(), string_comma() and string_before().
This MUST be the single implementation of the rendering rules.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Amount

# (threshold, divisor, suffix), checked in order.
MAGNITUDES = (
    (1_000_000, 1_000_000, "M"),
    (1_000, 1_000, "K"),
)


def trim_decimal(value: float) -> str:
    """Render ``value`` with at most two decimals.

    Rounds like ``%.2f`` does, then drops trailing zeros and a dangling point:
    3.50 -> "3.5", 3.00 -> "3", 100.006 -> "100.01".
    """
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    # -0.001 and -0.0 both round to "-0"
    if text == "-0":
        return "0"
    return text


def scale(quantity: float) -> tuple[float, str]:
    """Pick the magnitude bucket for ``quantity``.

    Returns:
        (scaled quantity, suffix) where suffix is "M", "K" or "".
    """
    for threshold, divisor, suffix in MAGNITUDES:
        if quantity >= threshold:
            return quantity / divisor, suffix
    return quantity, ""


def format_amount(
    amount: Amount,
    *,
    decimal_sep: str = ".",
    currency_before: bool = False,
) -> str:
    """Format an amount as a human-readable string.

    Rules:
    1. Scale to millions ("M") or thousands ("K") when large enough
    2. At most 2 decimals, no trailing zeros or trailing point
    3. Currency after the number, separated by a space ("3.5M €")
    4. currency_before=True moves the currency in front, no space ("€3.5M")
    5. decimal_sep="," replaces every "." in the output
    """
    number, suffix = scale(amount.quantity)
    text = trim_decimal(number) + suffix
    if amount.currency:
        text = f"{text} {amount.currency}"

    if decimal_sep != ".":
        text = text.replace(".", decimal_sep)

    if currency_before:
        quantity, _, currency = text.partition(" ")
        if currency:
            return currency + quantity
    return text
