"""Amount parser.

Turns free-form text such as "USD 3.5M", "3500000 €" or "3,5M€" into an
Amount. Errors are raised, never returned: a failed parse yields nothing.
"""
from __future__ import annotations

import math
import os
import re
import sys

from .currency import DEFAULT_TABLE, CurrencyTable
from .errors import InvalidFormatError, InvalidNumberError
from .types import Amount

_DEFAULT_DECIMAL_SEP = "."
_SEPARATORS = (".", ",")

# prefix, number, magnitude, suffix. "mm" must be tried before "m" or
# "6mm" would leave a stray "m" behind as the currency suffix.
MONEY_PATTERN = re.compile(r"([^0-9 ]*) *([0-9][0-9,.]*) *(mm|m|k)? *([^0-9]*)")

MULTIPLIERS = {
    "mm": 1_000_000.0,
    "m": 1_000_000.0,
    "k": 1_000.0,
}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1")


class Parser:
    """Money text parser.

    Example::

        parser = Parser(decimal_sep=",")
        amount = parser.parse("3,5M€")
        print(amount)  # 3.5M €

    Args:
        decimal_sep: Decimal separator, "." or ",". The other one is treated
            as a thousands separator and ignored.
        table: Currency alias table used to resolve currency tokens
        keep_unknown_currency: Keep unrecognized currency tokens (lowercased)
            instead of dropping them (default: False)
        log_unknown_currency: Emit MONEYTEXT_UNKNOWN_CURRENCY to stderr when a
            currency token is not in the table (default: False, or
            MONEYTEXT_LOG_UNKNOWN=1)
    """

    def __init__(
        self,
        *,
        decimal_sep: str = _DEFAULT_DECIMAL_SEP,
        table: CurrencyTable = DEFAULT_TABLE,
        keep_unknown_currency: bool = False,
        log_unknown_currency: bool = False,
    ):
        if decimal_sep not in _SEPARATORS:
            raise ValueError(
                f"decimal_sep must be one of {_SEPARATORS}, got {decimal_sep!r}"
            )
        # Environment variable activation
        log_unknown_currency = log_unknown_currency or _env_flag("MONEYTEXT_LOG_UNKNOWN")

        self._decimal_sep = decimal_sep
        self._group_sep = "," if decimal_sep == "." else "."
        self._table = table
        self._keep_unknown = keep_unknown_currency
        self._log_unknown = log_unknown_currency

    @property
    def decimal_sep(self) -> str:
        return self._decimal_sep

    def parse(self, text: str) -> Amount:
        """Parse ``text`` into an Amount.

        Raises:
            InvalidFormatError: The text is not shaped like an amount, or has a
                currency token on both sides of the number.
            InvalidNumberError: The number has more than one decimal separator
                or does not fit in a float.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        normalized = text.replace(self._group_sep, "").strip().lower()
        match = MONEY_PATTERN.fullmatch(normalized)
        if match is None:
            raise InvalidFormatError(text)

        prefix, number, magnitude, suffix = match.groups()
        if prefix and suffix:
            raise InvalidFormatError(text)

        if number.count(self._decimal_sep) > 1:
            raise InvalidNumberError(text)

        quantity = self._to_float(number, text)
        if magnitude:
            quantity *= MULTIPLIERS[magnitude]
            if not math.isfinite(quantity):
                raise InvalidNumberError(text)

        currency = self._resolve_currency(prefix or suffix, normalized)
        return Amount(quantity, currency)

    def _to_float(self, number: str, text: str) -> float:
        if self._decimal_sep == ",":
            number = number.replace(",", ".")
        try:
            value = float(number)
        except ValueError as exc:
            raise InvalidNumberError(text) from exc
        # float() saturates to inf instead of failing on huge literals
        if not math.isfinite(value):
            raise InvalidNumberError(text)
        return value

    def _resolve_currency(self, token: str, normalized: str) -> str:
        if not token:
            return ""
        symbol = self._table.lookup(token)
        if symbol is not None:
            return symbol
        if self._log_unknown:
            self._log_unknown_currency(token, normalized)
        return token if self._keep_unknown else ""

    def _log_unknown_currency(self, token: str, normalized: str) -> None:
        """Emit structured MONEYTEXT_UNKNOWN_CURRENCY log line to stderr."""
        parts = [
            "MONEYTEXT_UNKNOWN_CURRENCY",
            f"token={token}",
            f"input={normalized}",
            f"decimal_sep={self._decimal_sep}",
        ]
        print(" ".join(parts), file=sys.stderr)

    def __repr__(self) -> str:
        return (
            f"Parser(decimal_sep={self._decimal_sep!r}, "
            f"keep_unknown_currency={self._keep_unknown})"
        )


_DOT_PARSER = Parser()
_COMMA_PARSER = Parser(decimal_sep=",")


def parse(text: str) -> Amount:
    """Parse an amount using "." as the decimal separator."""
    return _DOT_PARSER.parse(text)


def parse_comma(text: str) -> Amount:
    """Parse an amount using "," as the decimal separator."""
    return _COMMA_PARSER.parse(text)
