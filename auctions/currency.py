"""Currency codes understood by the auction domain."""

from __future__ import annotations

from enum import Enum


class CurrencyCode(Enum):
    """A currency with its numeric code; ``NONE`` marks an unset currency."""

    NONE = 0
    VAC = 1001
    SEK = 752
    DKK = 208

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "CurrencyCode":
        """Return the currency named by ``text``; raise ValueError if unknown."""
        try:
            return _PARSEABLE[text]
        except KeyError:
            raise ValueError(f"Unknown currency code: {text!r}") from None


_PARSEABLE = {
    "VAC": CurrencyCode.VAC,
    "SEK": CurrencyCode.SEK,
    "DKK": CurrencyCode.DKK,
}