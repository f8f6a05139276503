"""Auctions: sealed-bid and timed ascending, and how bids are accepted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .amount import Amount
from .bid import Bid, BidData
from .currency import CurrencyCode
from .errors import Errors, ValidationError
from .user import UserId

if TYPE_CHECKING:
    from .commands import CreateAuctionCommand


@dataclass(frozen=True)
class AuctionId:
    """Numeric identifier of an auction."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


class AuctionType(Enum):
    SINGLE_SEALED_BID = "SingleSealedBid"
    TIMED_ASCENDING = "TimedAscending"

    def __str__(self) -> str:
        return self.value


class SingleSealedBidOptions(Enum):
    """Blind: the winner pays their own bid. Vickrey: the second-highest bid."""

    BLIND = "Blind"
    VICKREY = "Vickrey"


@dataclass(frozen=True)
class TimedAscendingOptions:
    reserve_price: int = 0
    min_raise: int = 0
    time_frame: timedelta = timedelta(0)


def _highest(bids: list[Bid]) -> Bid:
    # Among equal amounts the latest bid counts as highest.
    return max(reversed(bids), key=lambda bid: bid.amount.value)


@dataclass(kw_only=True)
class Auction(ABC):
    """State shared by every kind of auction."""

    auction_id: AuctionId
    title: str
    starts_at: datetime
    expiry: datetime
    user: UserId
    currency: CurrencyCode
    bids: list[Bid] = field(default_factory=list)
    open_bidders: bool = False

    @property
    @abstractmethod
    def auction_type(self) -> AuctionType:
        """The kind of auction."""

    def _new_bid(self, bid: BidData) -> Bid:
        return Bid(len(self.bids) + 1, bid.user, bid.amount, bid.at)

    def _check_window(self, time: datetime, candidate: Bid) -> None:
        errors = candidate.validate(self)
        if not errors.is_none():
            raise ValidationError(errors)
        if time > self.expiry:
            raise ValidationError(Errors.AUCTION_HAS_ENDED)
        if time < self.starts_at:
            raise ValidationError(Errors.AUCTION_HAS_NOT_STARTED)

    @abstractmethod
    def try_add_bid(self, time: datetime, bid: BidData) -> None:
        """Record ``bid`` at ``time``; raise ValidationError if it is refused."""

    @abstractmethod
    def get_bids(self, time: datetime) -> Optional[list[Bid]]:
        """The bids visible at ``time``, or None when they are hidden."""

    @abstractmethod
    def try_get_amount_and_winner(self, time: datetime) -> Optional[tuple[Amount, UserId]]:
        """The price and winner once decided at ``time``, else None."""

    @abstractmethod
    def has_ended(self, time: datetime) -> bool:
        """Whether the auction is over at ``time``."""


@dataclass(kw_only=True)
class SingleSealedBidAuction(Auction):
    """Each bidder bids once; bids are shown only while the auction runs."""

    options: SingleSealedBidOptions

    @property
    def auction_type(self) -> AuctionType:
        return AuctionType.SINGLE_SEALED_BID

    def try_add_bid(self, time: datetime, bid: BidData) -> None:
        candidate = self._new_bid(bid)
        self._check_window(time, candidate)
        if any(existing.user == bid.user for existing in self.bids):
            raise ValidationError(Errors.ALREADY_PLACED_BID)
        self.bids.append(candidate)

    def get_bids(self, time: datetime) -> Optional[list[Bid]]:
        if time < self.starts_at or time > self.expiry:
            return None
        return list(self.bids)

    def try_get_amount_and_winner(self, time: datetime) -> Optional[tuple[Amount, UserId]]:
        if time <= self.expiry or not self.bids:
            return None
        if self.options is SingleSealedBidOptions.BLIND:
            best = _highest(self.bids)
            return best.amount, best.user
        if len(self.bids) == 1:
            only = self.bids[0]
            return only.amount, only.user
        ranked = sorted(self.bids, key=lambda b: b.amount.value, reverse=True)
        return ranked[1].amount, ranked[0].user

    def has_ended(self, time: datetime) -> bool:
        return time > self.expiry


@dataclass(kw_only=True)
class TimedAscendingAuction(Auction):
    """English auction: each bid must beat the highest by the minimum raise."""

    options: TimedAscendingOptions = field(default_factory=TimedAscendingOptions)
    ends_at: Optional[datetime] = None

    @property
    def auction_type(self) -> AuctionType:
        return AuctionType.TIMED_ASCENDING

    def try_add_bid(self, time: datetime, bid: BidData) -> None:
        candidate = self._new_bid(bid)
        self._check_window(time, candidate)
        if self.bids:
            highest = _highest(self.bids).amount.value
            if bid.amount.value <= highest:
                raise ValidationError(Errors.MUST_PLACE_BID_OVER_HIGHEST_BID)
            if bid.amount.value < highest + self.options.min_raise:
                raise ValidationError(Errors.MUST_RAISE_WITH_AT_LEAST)
        current_end = self.ends_at if self.ends_at is not None else self.expiry
        self.ends_at = max(time + self.options.time_frame, current_end)
        self.bids.append(candidate)

    def get_bids(self, time: datetime) -> Optional[list[Bid]]:
        if time < self.starts_at:
            return None
        return list(self.bids)

    def try_get_amount_and_winner(self, time: datetime) -> Optional[tuple[Amount, UserId]]:
        if time <= self.expiry or not self.bids:
            return None
        best = _highest(self.bids)
        if best.amount.value >= self.options.reserve_price:
            return best.amount, best.user
        return None

    def has_ended(self, time: datetime) -> bool:
        end = self.ends_at if self.ends_at is not None else self.expiry
        return time > end


def create_auction(command: "CreateAuctionCommand", user_id: UserId) -> Auction:
    """Build a new, unsaved auction (id 0) owned by ``user_id``."""
    common = dict(
        auction_id=AuctionId(0),
        title=command.title,
        starts_at=command.starts_at,
        expiry=command.ends_at,
        user=user_id,
        currency=command.currency,
        open_bidders=command.open_bidders,
    )
    if command.single_sealed_bid_options is not None:
        return SingleSealedBidAuction(options=command.single_sealed_bid_options, **common)
    options = TimedAscendingOptions(
        reserve_price=command.reserve_price or 0,
        min_raise=command.min_raise or 0,
        time_frame=command.time_frame if command.time_frame is not None else timedelta(0),
    )
    return TimedAscendingAuction(options=options, **common)