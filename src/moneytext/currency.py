"""Currency alias table.

Maps every recognized token (symbol or ISO-style code) to one canonical
symbol. The default table is built once at import and never mutated.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Canonical symbol -> aliases. The symbol itself is always an alias.
# Nothing may start with "k" or "m": after a number those read as K/M.
CURRENCY_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "$": ("usd", "us$"),
    "€": ("eur", "euro", "euros"),
    "£": ("gbp",),
    "¥": ("jpy", "yen"),
    "CN¥": ("cny", "rmb", "元"),
    "₹": ("inr",),
    "₽": ("rub",),
    "₩": ("won",),
    "₺": ("try",),
    "₴": ("uah",),
    "₪": ("ils",),
    "₫": ("vnd",),
    "₱": ("php",),
    "₦": ("ngn",),
    "฿": ("thb",),
    "₿": ("btc", "xbt"),
    "C$": ("cad",),
    "A$": ("aud",),
    "NZ$": ("nzd",),
    "HK$": ("hkd",),
    "S$": ("sgd",),
    "R$": ("brl",),
    "CHF": ("fr", "fr.", "sfr"),
    "SEK": (),
    "NOK": (),
    "DKK": (),
    "zł": ("pln",),
    "CZK": (),
    "Ft": ("huf",),
    "lei": ("ron",),
    "ZAR": (),
})


class CurrencyTable:
    """Read-only alias -> canonical symbol index.

    Example::

        table = CurrencyTable({"$": ("usd",)})
        table.lookup("USD")   # "$"
        table.lookup("leur")  # None

    Raises:
        ValueError: If one alias is claimed by two canonical symbols.
    """

    __slots__ = ("_index", "_symbols")

    def __init__(self, aliases: Mapping[str, Iterable[str]]):
        index: dict[str, str] = {}
        for symbol, names in aliases.items():
            for alias in (symbol, *names):
                key = alias.strip().lower()
                if not key:
                    raise ValueError(f"Empty alias for currency {symbol!r}")
                owner = index.get(key)
                if owner is not None and owner != symbol:
                    raise ValueError(
                        f"Alias {alias!r} maps to both {owner!r} and {symbol!r}"
                    )
                index[key] = symbol
        self._index = MappingProxyType(index)
        self._symbols = tuple(aliases)

    def lookup(self, token: str) -> str | None:
        """Return the canonical symbol for ``token``, or None if unknown."""
        return self._index.get(token.strip().lower())

    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"CurrencyTable(symbols={len(self._symbols)}, aliases={len(self._index)})"


DEFAULT_TABLE = CurrencyTable(CURRENCY_ALIASES)


def identify_currency(token: str, table: CurrencyTable = DEFAULT_TABLE) -> str:
    """Resolve a currency token to its canonical symbol.

    Unknown tokens resolve to an empty string rather than raising.
    """
    return table.lookup(token) or ""
