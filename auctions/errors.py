"""Validation flags and the exceptions raised by the auction domain."""

from __future__ import annotations

from enum import IntFlag


class Errors(IntFlag):
    """Bid and auction validation failures; members combine with ``|``."""

    NONE = 0
    UNKNOWN_AUCTION = 1 << 0
    AUCTION_ALREADY_EXISTS = 1 << 1
    AUCTION_HAS_ENDED = 1 << 2
    AUCTION_HAS_NOT_STARTED = 1 << 3
    AUCTION_NOT_FOUND = 1 << 4
    SELLER_CANNOT_PLACE_BIDS = 1 << 5
    BID_CURRENCY_CONVERSION = 1 << 6
    INVALID_USER_DATA = 1 << 7
    MUST_PLACE_BID_OVER_HIGHEST_BID = 1 << 8
    ALREADY_PLACED_BID = 1 << 9
    MUST_RAISE_WITH_AT_LEAST = 1 << 10
    MUST_SPECIFY_AMOUNT = 1 << 11

    def is_none(self) -> bool:
        """True when no failure is set."""
        return self == Errors.NONE

    def describe(self) -> str:
        """Human-readable text; combined flags are joined with commas."""
        if self.is_none():
            return _MESSAGES[Errors.NONE]
        parts = [
            _MESSAGES[member]
            for member in Errors
            if member.value and (self.value & member.value) == member.value
        ]
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.describe()


_MESSAGES = {
    Errors.NONE: "No error",
    Errors.UNKNOWN_AUCTION: "Unknown auction",
    Errors.AUCTION_ALREADY_EXISTS: "Auction already exists",
    Errors.AUCTION_HAS_ENDED: "Auction has ended",
    Errors.AUCTION_HAS_NOT_STARTED: "Auction has not started",
    Errors.AUCTION_NOT_FOUND: "Auction not found",
    Errors.SELLER_CANNOT_PLACE_BIDS: "Seller cannot place bids",
    Errors.BID_CURRENCY_CONVERSION: "Bid currency conversion error",
    Errors.INVALID_USER_DATA: "Invalid user data",
    Errors.MUST_PLACE_BID_OVER_HIGHEST_BID: "Must place bid over highest bid",
    Errors.ALREADY_PLACED_BID: "Already placed bid",
    Errors.MUST_RAISE_WITH_AT_LEAST: "Must raise with at least minimum raise amount",
    Errors.MUST_SPECIFY_AMOUNT: "Must specify amount",
}


class DomainError(Exception):
    """Base class of all domain failures; raised directly for generic ones."""

    prefix = "Domain error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class ValidationError(DomainError):
    """One or more validation flags were raised."""

    prefix = "Validation error"

    def __init__(self, errors: Errors) -> None:
        self.errors = Errors(errors)
        super().__init__(self.errors.describe())


class InvalidAmountError(DomainError, ValueError):
    prefix = "Invalid amount"


class CurrencyMismatchError(DomainError):
    """Two amounts in different currencies were combined."""

    prefix = "Currency mismatch"

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"{left} vs {right}")


class InvalidUserError(DomainError, ValueError):
    prefix = "Invalid user"


class NotFoundError(DomainError):
    prefix = "Not found"


class RepositoryError(DomainError):
    prefix = "Repository error"


class UnauthorizedError(DomainError):
    prefix = "Unauthorized"


class InternalError(DomainError):
    prefix = "Internal error"