"""Commands that ask the domain to create auctions and bids."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

from .amount import Amount
from .currency import CurrencyCode

if TYPE_CHECKING:
    from .auction import AuctionId, SingleSealedBidOptions


@dataclass(frozen=True)
class CreateAuctionCommand:
    """Request to open a new auction.

    Giving ``single_sealed_bid_options`` makes a sealed-bid auction; otherwise
    a timed ascending auction is created from the remaining options.
    """

    title: str
    currency: CurrencyCode
    starts_at: datetime
    ends_at: datetime
    min_raise: Optional[int] = None
    reserve_price: Optional[int] = None
    time_frame: Optional[timedelta] = None
    single_sealed_bid_options: Optional["SingleSealedBidOptions"] = None
    open_bidders: bool = False


@dataclass(frozen=True)
class CreateBidCommand:
    """Request to place a bid of ``amount`` on an auction."""

    amount: Amount
    auction_id: "AuctionId"