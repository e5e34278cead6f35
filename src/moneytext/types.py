"""Amount value type."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidNumberError
from .format import format_amount


@dataclass(frozen=True)
class Amount:
    """A quantity of money with an optional currency.

    ``currency`` is a canonical symbol ("$", "€") or "" when unknown.
    """
    quantity: float
    currency: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.quantity):
            raise InvalidNumberError(repr(self.quantity))

    def __str__(self) -> str:
        return self.string()

    def string(self) -> str:
        """Format as "[QUANTITY](.DECIMAL)(M|K)( CURRENCY)"."""
        return format_amount(self)

    def string_comma(self) -> str:
        """Format as "[QUANTITY](,DECIMAL)(M|K)( CURRENCY)"."""
        return format_amount(self, decimal_sep=",")

    def string_before(self) -> str:
        """Format as "[CURRENCY][QUANTITY](.DECIMAL)(M|K)"."""
        return format_amount(self, currency_before=True)


def new_amount(quantity: float, currency: str = "") -> Amount:
    """Create an amount with the given quantity and currency."""
    return Amount(float(quantity), currency)
