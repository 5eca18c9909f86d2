from __future__ import annotations

import pytest

from suite_prices.domain.monetary.currency import Currency, CurrencyType
from suite_prices.domain.monetary.currency_registry import (
    USD,
    VND,
    available_codes,
    currency_from_numeric,
    fraction_digits,
    get_currency,
    validate_currency,
)
from suite_prices.domain.monetary.errors import UnknownCurrencyError


@pytest.mark.parametrize("code, expected", [("vnd", "VND"), ("usD", "USD"), ("dkk", "DKK"), (" eur ", "EUR")])
def test_validate_currency_normalizes(code, expected):
    assert validate_currency(code) == expected


def test_validate_currency_is_idempotent_and_case_insensitive():
    assert validate_currency("usd") == validate_currency("USD")
    assert validate_currency(validate_currency("usd")) == "USD"


@pytest.mark.parametrize("code", ["", "US", "ABC", "dollar", None, 840])
def test_validate_currency_rejects_unknown(code):
    with pytest.raises(UnknownCurrencyError):
        validate_currency(code)


@pytest.mark.parametrize(
    "code, expected",
    [("VND", 0), ("USD", 2), ("DKK", 2), ("JPY", 0), ("KWD", 3), ("CLF", 4)],
)
def test_fraction_digits(code, expected):
    assert fraction_digits(code) == expected


def test_get_currency_returns_registered_instance():
    assert get_currency("usd") is USD
    assert get_currency(Currency("VND", "704", 0, "Dong")) is VND


def test_currency_from_numeric():
    assert currency_from_numeric("840") is USD
    assert currency_from_numeric(704) is VND
    assert currency_from_numeric(8).code == "ALL"

    with pytest.raises(UnknownCurrencyError):
        currency_from_numeric("000")


def test_available_codes_sorted_and_complete():
    codes = available_codes()

    assert list(codes) == sorted(codes)
    assert {"USD", "EUR", "JPY", "VND", "XAU"} <= set(codes)


def test_currency_metadata():
    gold = get_currency("XAU")

    assert gold.currency_type == CurrencyType.COMMODITY
    assert not gold.is_fiat
    assert USD.is_fiat
    assert USD.numeric_code == "840"
    assert USD.name == "US Dollar"
    assert str(USD) == "USD"


def test_currency_validates_inputs():
    with pytest.raises(ValueError, match="3-letter"):
        Currency("US", "840", 2, "US Dollar")
    with pytest.raises(ValueError, match="3-digit"):
        Currency("USD", "84", 2, "US Dollar")
    with pytest.raises(ValueError, match="between 0 and 18"):
        Currency("USD", "840", 19, "US Dollar")
    with pytest.raises(TypeError):
        Currency("USD", "840", 2, "US Dollar", "FIAT")
