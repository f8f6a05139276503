"""JSON-facing models of auctions and bids, and their mapping from the domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from .amount import Amount
from .auction import Auction, AuctionId, SingleSealedBidOptions
from .commands import CreateAuctionCommand, CreateBidCommand
from .currency import CurrencyCode

_SEALED_OPTIONS = {
    "Blind": SingleSealedBidOptions.BLIND,
    "Vickrey": SingleSealedBidOptions.VICKREY,
}


def _currency_to_json(currency: CurrencyCode) -> str:
    return "None" if currency is CurrencyCode.NONE else currency.name


def _currency_from_json(value: Any) -> CurrencyCode:
    if not isinstance(value, str):
        raise ValueError(f"Currency must be a string, got {value!r}")
    if value == "None":
        return CurrencyCode.NONE
    return CurrencyCode.parse(value)


def _datetime_to_json(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _datetime_from_json(value: Any, key: str) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a timestamp string, got {value!r}")
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"{key} is not a valid timestamp: {value!r}") from None
    if moment.tzinfo is None:
        raise ValueError(f"{key} must carry a time zone: {value!r}")
    return moment.astimezone(timezone.utc)


def _amount_to_json(amount: Amount) -> dict[str, Any]:
    return {"value": amount.value, "currency": _currency_to_json(amount.currency)}


def _amount_from_json(value: Any) -> Amount:
    if isinstance(value, str):
        return Amount.parse(value)
    if isinstance(value, Mapping):
        number = value.get("value")
        if not isinstance(number, int) or isinstance(number, bool):
            raise ValueError(f"Amount value must be an integer, got {number!r}")
        return Amount(number, _currency_from_json(value.get("currency")))
    raise ValueError(f"Invalid amount: {value!r}")


def _required(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"Missing field: {key}") from None


def _optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class BidModel:
    """A bid as shown to clients; ``at`` is the time since the auction started."""

    amount: Amount
    bidder: Optional[str]
    at: timedelta

    def to_json(self) -> dict[str, Any]:
        return {
            "amount": _amount_to_json(self.amount),
            "bidder": self.bidder,
            "at": self.at.total_seconds(),
        }


@dataclass(frozen=True)
class AuctionModel:
    """An auction as shown to clients."""

    id: int
    starts_at: datetime
    title: str
    expiry: datetime
    seller: Optional[str]
    currency: CurrencyCode
    bids: list[BidModel] = field(default_factory=list)
    price: Optional[Amount] = None
    winner: Optional[str] = None
    has_ended: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "startsAt": _datetime_to_json(self.starts_at),
            "title": self.title,
            "expiry": _datetime_to_json(self.expiry),
            "seller": self.seller,
            "currency": _currency_to_json(self.currency),
            "bids": [bid.to_json() for bid in self.bids],
            "price": None if self.price is None else _amount_to_json(self.price),
            "winner": self.winner,
            "hasEnded": self.has_ended,
        }


@dataclass(frozen=True)
class CreateAuctionModel:
    """The request body for creating an auction; ``time_frame`` is in seconds."""

    title: str
    currency: CurrencyCode
    starts_at: datetime
    ends_at: datetime
    min_raise: Optional[int] = None
    reserve_price: Optional[int] = None
    time_frame: Optional[int] = None
    single_sealed_bid_options: Optional[str] = None
    open_bidders: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "CreateAuctionModel":
        """Read a decoded JSON object; raise ValueError on missing or bad fields."""
        title = _required(data, "title")
        if not isinstance(title, str):
            raise ValueError(f"title must be a string, got {title!r}")
        options = data.get("singleSealedBidOptions")
        if options is not None and not isinstance(options, str):
            raise ValueError(f"singleSealedBidOptions must be a string, got {options!r}")
        open_bidders = data.get("openBidders", False)
        if not isinstance(open_bidders, bool):
            raise ValueError(f"openBidders must be a boolean, got {open_bidders!r}")
        return cls(
            title=title,
            currency=_currency_from_json(_required(data, "currency")),
            starts_at=_datetime_from_json(_required(data, "startsAt"), "startsAt"),
            ends_at=_datetime_from_json(_required(data, "endsAt"), "endsAt"),
            min_raise=_optional_int(data, "minRaise"),
            reserve_price=_optional_int(data, "reservePrice"),
            time_frame=_optional_int(data, "timeFrame"),
            single_sealed_bid_options=options,
            open_bidders=open_bidders,
        )

    def to_command(self) -> CreateAuctionCommand:
        """The domain command; unknown sealed-bid options mean a timed auction."""
        return CreateAuctionCommand(
            title=self.title,
            currency=self.currency,
            starts_at=self.starts_at,
            ends_at=self.ends_at,
            min_raise=self.min_raise,
            reserve_price=self.reserve_price,
            time_frame=None if self.time_frame is None else timedelta(seconds=self.time_frame),
            single_sealed_bid_options=_SEALED_OPTIONS.get(self.single_sealed_bid_options or ""),
            open_bidders=self.open_bidders,
        )


@dataclass(frozen=True)
class CreateBidModel:
    """The request body for placing a bid."""

    amount: Amount

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "CreateBidModel":
        """Read ``{"amount": ...}``; the amount is an object or text like ``SEK100``."""
        return cls(_amount_from_json(_required(data, "amount")))

    def to_command(self, auction_id: AuctionId | int) -> CreateBidCommand:
        if not isinstance(auction_id, AuctionId):
            auction_id = AuctionId(auction_id)
        return CreateBidCommand(amount=self.amount, auction_id=auction_id)


def map_auction_to_model(auction: Auction, now: datetime) -> AuctionModel:
    """Describe ``auction`` as clients see it at ``now``."""
    winner_info = auction.try_get_amount_and_winner(now)
    visible = auction.get_bids(now) or []
    return AuctionModel(
        id=auction.auction_id.value,
        starts_at=auction.starts_at,
        title=auction.title,
        expiry=auction.expiry,
        seller=str(auction.user),
        currency=auction.currency,
        bids=[
            BidModel(amount=bid.amount, bidder=str(bid.user), at=bid.at - auction.starts_at)
            for bid in visible
        ],
        price=None if winner_info is None else winner_info[0],
        winner=None if winner_info is None else str(winner_info[1]),
        has_ended=auction.has_ended(now),
    )