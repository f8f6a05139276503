"""Bids placed on auctions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from .amount import Amount
from .errors import Errors
from .user import UserId

if TYPE_CHECKING:
    from .auction import Auction


@dataclass(frozen=True)
class BidData:
    """What a bidder offers: who, how much and when."""

    user: UserId
    amount: Amount
    at: datetime


@dataclass(frozen=True)
class Bid:
    """A bid recorded on an auction, numbered from 1 in order of arrival."""

    id: int
    user: UserId
    amount: Amount
    at: datetime

    @property
    def data(self) -> BidData:
        return BidData(self.user, self.amount, self.at)

    def validate(self, auction: "Auction") -> Errors:
        """Return every rule of ``auction`` this bid breaks, combined."""
        errors = Errors.NONE
        if self.user == auction.user:
            errors |= Errors.SELLER_CANNOT_PLACE_BIDS
        if self.amount.currency != auction.currency:
            errors |= Errors.BID_CURRENCY_CONVERSION
        if self.at < auction.starts_at:
            errors |= Errors.AUCTION_HAS_NOT_STARTED
        if self.at > auction.expiry:
            errors |= Errors.AUCTION_HAS_ENDED
        return errors