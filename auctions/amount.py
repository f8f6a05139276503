"""Money amounts tied to a currency."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .currency import CurrencyCode
from .errors import CurrencyMismatchError, InvalidAmountError

_AMOUNT_PATTERN = re.compile(r"(?P<currency>[A-Z]+)(?P<value>[0-9]+)")
_MAX_VALUE = 2**63 - 1


@dataclass(frozen=True)
class Amount:
    """A whole-number value in a currency, written like ``SEK100``."""

    value: int
    currency: CurrencyCode

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """Parse text such as ``SEK100``; raise InvalidAmountError on bad input."""
        match = _AMOUNT_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidAmountError(f"Invalid amount value: {text}")
        value = int(match["value"])
        if value > _MAX_VALUE:
            raise InvalidAmountError(f"Invalid amount value: {text}")
        try:
            currency = CurrencyCode.parse(match["currency"])
        except ValueError:
            raise InvalidAmountError(f"Invalid currency code: {text}") from None
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: CurrencyCode) -> "Amount":
        return cls(0, currency)

    def __str__(self) -> str:
        return f"{self.currency}{self.value}"

    def _check_currency(self, other: "Amount") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(str(self.currency), str(other.currency))

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_currency(other)
        return Amount(self.value + other.value, self.currency)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_currency(other)
        return Amount(self.value - other.value, self.currency)

    # Amounts in different currencies are unordered: every comparison is False.
    def __lt__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.currency == other.currency and self.value < other.value

    def __le__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.currency == other.currency and self.value <= other.value

    def __gt__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.currency == other.currency and self.value > other.value

    def __ge__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.currency == other.currency and self.value >= other.value