import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from auctions.amount import Amount
from auctions.auction import AuctionId, SingleSealedBidOptions
from auctions.commands import CreateAuctionCommand, CreateBidCommand
from auctions.currency import CurrencyCode

STARTS_AT = datetime(2016, 1, 1, tzinfo=timezone.utc)
ENDS_AT = datetime(2016, 2, 1, tzinfo=timezone.utc)


def make_command(**overrides):
    return CreateAuctionCommand(
        title="auction",
        currency=CurrencyCode.SEK,
        starts_at=STARTS_AT,
        ends_at=ENDS_AT,
        **overrides,
    )


def test_optional_fields_default_to_unset():
    command = make_command()
    assert command.min_raise is None
    assert command.reserve_price is None
    assert command.time_frame is None
    assert command.single_sealed_bid_options is None
    assert command.open_bidders is False


def test_fields_keep_given_values():
    frame = timedelta(minutes=1)
    command = make_command(
        min_raise=10,
        reserve_price=150,
        time_frame=frame,
        single_sealed_bid_options=SingleSealedBidOptions.VICKREY,
        open_bidders=True,
    )
    assert command.min_raise == 10
    assert command.reserve_price == 150
    assert command.time_frame == frame
    assert command.single_sealed_bid_options is SingleSealedBidOptions.VICKREY
    assert command.open_bidders is True


def test_auction_command_is_immutable():
    command = make_command()
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.title = "changed"
    assert command.title == "auction"


def test_auction_command_replace_keeps_other_fields():
    command = make_command(min_raise=10)
    changed = dataclasses.replace(command, title="other")
    assert changed.title == "other"
    assert changed.min_raise == command.min_raise
    assert changed != command


def test_bid_command_holds_amount_and_auction():
    amount = Amount.parse("SEK100")
    command = CreateBidCommand(amount=amount, auction_id=AuctionId(1))
    assert command.amount == Amount(100, CurrencyCode.SEK)
    assert command.auction_id == AuctionId(1)
    assert command == CreateBidCommand(Amount(100, CurrencyCode.SEK), AuctionId(1))


def test_bid_command_is_immutable():
    command = CreateBidCommand(Amount.zero(CurrencyCode.SEK), AuctionId(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.auction_id = AuctionId(2)
    assert command.auction_id == AuctionId(1)