import pytest

from auctions.errors import InvalidUserError
from auctions.user import BuyerOrSeller, Support, User, UserId


def test_create_buyer_or_seller():
    user = BuyerOrSeller(UserId("user123"), "John Doe")
    assert user.id.value == "user123"
    assert user.name == "John Doe"


def test_create_support():
    user = Support(UserId("support456"))
    assert user.id.value == "support456"


def test_user_from_string_buyer_or_seller():
    user = User.parse("BuyerOrSeller|user123|John Doe")
    assert user == BuyerOrSeller(UserId("user123"), "John Doe")


def test_user_from_string_buyer_without_name():
    user = User.parse("BuyerOrSeller|user456")
    assert user == BuyerOrSeller(UserId("user456"), None)


def test_user_from_string_support():
    user = User.parse("Support|support456")
    assert user == Support(UserId("support456"))


@pytest.mark.parametrize("text", ["", "Unknown|id", "BuyerOrSeller", "Support"])
def test_user_from_string_invalid(text):
    with pytest.raises(InvalidUserError):
        User.parse(text)


def test_unknown_type_message():
    with pytest.raises(InvalidUserError) as info:
        User.parse("Unknown|id")
    assert info.value.message == "Unknown user type: Unknown"


def test_user_display():
    user1 = BuyerOrSeller(UserId("user123"), "John Doe")
    assert str(user1) == "BuyerOrSeller|user123|John Doe"

    user2 = BuyerOrSeller(UserId("user456"))
    assert str(user2) == "BuyerOrSeller|user456"

    user3 = Support(UserId("support789"))
    assert str(user3) == "Support|support789"


@pytest.mark.parametrize(
    "user",
    [
        BuyerOrSeller(UserId("user123"), "John Doe"),
        BuyerOrSeller(UserId("user456")),
        Support(UserId("support789")),
    ],
)
def test_display_parse_round_trip(user):
    assert User.parse(str(user)) == user


def test_user_id_display_and_equality():
    assert str(UserId("x1")) == "x1"
    assert UserId("x1") == UserId("x1")
    assert len({UserId("x1"), UserId("x1"), UserId("x2")}) == 2