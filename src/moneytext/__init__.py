"""moneytext: parse and format human-written money amounts."""
from .currency import CURRENCY_ALIASES, DEFAULT_TABLE, CurrencyTable, identify_currency
from .errors import InvalidFormatError, InvalidNumberError, MoneyError
from .format import format_amount, trim_decimal
from .parser import Parser, parse, parse_comma
from .types import Amount, new_amount

__all__ = [
    "Amount",
    "new_amount",
    "Parser",
    "parse",
    "parse_comma",
    "format_amount",
    "trim_decimal",
    "CurrencyTable",
    "CURRENCY_ALIASES",
    "DEFAULT_TABLE",
    "identify_currency",
    "MoneyError",
    "InvalidFormatError",
    "InvalidNumberError",
]
