"""Error classes for moneytext parsing."""
from __future__ import annotations


class MoneyError(ValueError):
    """Base error for money parsing operations."""

    def __init__(self, code: str, message: str, text: str | None = None):
        super().__init__(message)
        self.code = code
        self.text = text


class InvalidFormatError(MoneyError):
    """Raised when the input does not have the shape of an amount.

    Also raised when a currency token appears both before and after the number.
    """

    def __init__(self, text: str | None = None):
        super().__init__("INVALID_FORMAT", "invalid money format given", text)


class InvalidNumberError(MoneyError):
    """Raised when the numeric part cannot be turned into a finite float."""

    def __init__(self, text: str | None = None):
        super().__init__("INVALID_NUMBER", "invalid number format given", text)
