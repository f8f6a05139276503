# auctions

A small, dependency-free domain model for running online auctions.

It supports two kinds of auction:

- **Timed ascending** (English) auctions, with a reserve price, a minimum
  raise and a time frame: each accepted bid pushes the auction's `ends_at`
  to at least the bid time plus the time frame.
- **Single sealed-bid** auctions, either *blind* (the highest bidder pays
  their own bid) or *Vickrey* (the highest bidder pays the second-highest
  bid). Each bidder may bid only once.

## Installation

```
pip install .
```

## Modules

- `auctions.currency`: `CurrencyCode`, the supported currencies (`VAC`,
  `SEK`, `DKK`, plus `NONE` for an unset currency). `CurrencyCode.parse`
  reads a code and raises `ValueError` for an unknown one.
- `auctions.amount`: `Amount`, an integer value in a currency. Parse one
  from text such as `"SEK100"` with `Amount.parse` (bad input raises
  `InvalidAmountError`); `Amount.zero(currency)` gives a zero amount.
  Adding or subtracting amounts of different currencies raises
  `CurrencyMismatchError`; comparing them with `<`, `<=`, `>` or `>=`
  simply returns `False`.
- `auctions.user`: `UserId`, and `User` with its two kinds `BuyerOrSeller`
  and `Support`. `User.parse("BuyerOrSeller|x1|Jane")` or
  `User.parse("Support|s1")` reads the pipe-separated form that `str()`
  writes; malformed text raises `InvalidUserError`.
- `auctions.bid`: `BidData` (who, how much, when) and `Bid`, a bid recorded
  on an auction and numbered from 1. `Bid.validate(auction)` returns the
  combined `Errors` flags for every rule the bid breaks.
- `auctions.commands`: `CreateAuctionCommand` and `CreateBidCommand`.
- `auctions.auction`: `AuctionId`, `AuctionType`, `SingleSealedBidOptions`,
  `TimedAscendingOptions`, and the auctions `Auction`,
  `TimedAscendingAuction` and `SingleSealedBidAuction`, each with
  `try_add_bid`, `get_bids`, `try_get_amount_and_winner` and `has_ended`.
  `create_auction(command, user_id)` builds a new auction with id 0: a
  sealed-bid auction when the command has `single_sealed_bid_options`, a
  timed ascending one otherwise.
- `auctions.errors`: `Errors`, validation flags that combine with `|` and
  read as text through `describe()`, and `DomainError` with its subclasses
  `ValidationError`, `InvalidAmountError`, `CurrencyMismatchError`,
  `InvalidUserError`, `NotFoundError`, `RepositoryError`,
  `UnauthorizedError` and `InternalError`.
- `auctions.clock`: `SystemClock` and `RealSystemClock`, so that callers
  can supply a fixed "now" in tests.
- `auctions.api_models`: JSON-ready views of the domain. `AuctionModel` and
  `BidModel` have `to_json()`; `CreateAuctionModel.from_json` and
  `CreateBidModel.from_json` read decoded request bodies (camel-case keys
  such as `startsAt`, `endsAt`, `minRaise`, `timeFrame` in seconds,
  `singleSealedBidOptions` of `"Blind"` or `"Vickrey"`) and `to_command`
  turns them into domain commands. `map_auction_to_model(auction, now)`
  describes an auction as a client sees it at a given moment.

## Example

```python
from datetime import datetime, timedelta, timezone

from auctions.amount import Amount
from auctions.auction import create_auction
from auctions.bid import BidData
from auctions.commands import CreateAuctionCommand
from auctions.currency import CurrencyCode
from auctions.user import UserId

starts = datetime(2016, 1, 1, tzinfo=timezone.utc)
ends = datetime(2016, 2, 1, tzinfo=timezone.utc)

auction = create_auction(
    CreateAuctionCommand(
        title="Bicycle",
        currency=CurrencyCode.SEK,
        starts_at=starts,
        ends_at=ends,
        min_raise=10,
        reserve_price=150,
        time_frame=timedelta(minutes=1),
    ),
    UserId("seller"),
)

now = starts + timedelta(hours=1)
auction.try_add_bid(now, BidData(UserId("buyer"), Amount.parse("SEK200"), now))

print(auction.has_ended(ends + timedelta(hours=1)))
print(auction.try_get_amount_and_winner(ends + timedelta(hours=1)))
```

A refused bid raises `ValidationError`, whose `errors` attribute holds the
`Errors` flags that explain why: the seller bidding on their own auction,
a currency mismatch, a bid outside the auction's time window, a bid that is
not above the highest bid or that does not raise it by the minimum amount,
or a second bid from the same bidder in a sealed-bid auction.

## What this package does not do

It is a domain model only. It has no web server or HTTP routes, no
database or other storage for auctions, no handlers that load and save
auctions around a command, no reading of configuration, and no command to
run. `api_models` prepares JSON-ready data for such a service but does not
serve it.

## Running the tests

```
pip install ".[test]"
pytest
```