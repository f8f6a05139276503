import pytest

from auctions.amount import Amount
from auctions.currency import CurrencyCode
from auctions.errors import CurrencyMismatchError, InvalidAmountError


def test_create_amount():
    amount = Amount(100, CurrencyCode.SEK)
    assert amount.value == 100
    assert amount.currency is CurrencyCode.SEK


def test_zero_amount():
    amount = Amount.zero(CurrencyCode.VAC)
    assert amount.value == 0
    assert amount.currency is CurrencyCode.VAC


def test_amount_from_string_valid():
    amount = Amount.parse("SEK100")
    assert amount.value == 100
    assert amount.currency is CurrencyCode.SEK


def test_amount_from_string_invalid_currency():
    with pytest.raises(InvalidAmountError) as info:
        Amount.parse("XYZ100")
    assert "Invalid currency code" in info.value.message


def test_amount_from_string_invalid_value():
    with pytest.raises(InvalidAmountError) as info:
        Amount.parse("SEKabc")
    assert "Invalid amount value" in info.value.message


@pytest.mark.parametrize("text", ["", "100", "SEK", "sek100", "SEK100\n", "SEK-5"])
def test_amount_from_string_malformed(text):
    with pytest.raises(InvalidAmountError):
        Amount.parse(text)


def test_amount_from_string_overflow():
    with pytest.raises(InvalidAmountError) as info:
        Amount.parse("SEK" + "9" * 30)
    assert "Invalid amount value" in info.value.message


def test_amount_display():
    assert str(Amount(100, CurrencyCode.SEK)) == "SEK100"


@pytest.mark.parametrize("text", ["SEK100", "VAC0", "DKK42"])
def test_parse_display_round_trip(text):
    assert str(Amount.parse(text)) == text


def test_amount_add_same_currency():
    total = Amount(100, CurrencyCode.SEK) + Amount(200, CurrencyCode.SEK)
    assert total.value == 300
    assert total.currency is CurrencyCode.SEK


def test_amount_add_different_currency():
    with pytest.raises(CurrencyMismatchError) as info:
        Amount(100, CurrencyCode.SEK) + Amount(200, CurrencyCode.VAC)
    assert info.value.left == "SEK"
    assert info.value.right == "VAC"


def test_amount_subtract_same_currency():
    diff = Amount(300, CurrencyCode.SEK) - Amount(100, CurrencyCode.SEK)
    assert diff.value == 200
    assert diff.currency is CurrencyCode.SEK


def test_amount_subtract_different_currency():
    with pytest.raises(CurrencyMismatchError):
        Amount(300, CurrencyCode.SEK) - Amount(100, CurrencyCode.DKK)


def test_amount_compare():
    a1 = Amount(100, CurrencyCode.SEK)
    a2 = Amount(200, CurrencyCode.SEK)
    a3 = Amount(100, CurrencyCode.VAC)

    assert a1 < a2
    assert a2 > a1
    assert a1 <= Amount(100, CurrencyCode.SEK)
    assert not (a1 < a3)
    assert not (a1 > a3)
    assert not (a1 <= a3)
    assert not (a1 >= a3)
    assert a1 != a3


def test_equality_and_hash():
    assert Amount(5, CurrencyCode.SEK) == Amount.parse("SEK5")
    assert len({Amount(5, CurrencyCode.SEK), Amount.parse("SEK5")}) == 1