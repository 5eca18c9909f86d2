from __future__ import annotations

from decimal import Decimal

import pytest

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.amount_range import AmountRange
from suite_prices.domain.monetary.currency_registry import JPY, USD, VND
from suite_prices.domain.monetary.errors import (
    CurrencyMismatchError,
    NilOperandError,
    UnsupportedOperandTypeError,
)
from suite_prices.domain.monetary.taxed_amount import TaxedAmount
from suite_prices.domain.monetary.taxed_amount_range import TaxedAmountRange
from suite_prices.domain.pricing.discount import fixed_discount, fractional_discount, percentage_discount


def usd_taxed(net, gross) -> TaxedAmount:
    return TaxedAmount(Amount(net, USD), Amount(gross, USD))


def test_fixed_discount_keeps_base_type():
    amount_range = AmountRange(Amount(10, USD), Amount(20, USD))
    taxed_range = TaxedAmountRange(usd_taxed(10, 12), usd_taxed(20, 24))

    assert isinstance(fixed_discount(Amount(10, USD), Amount(1, USD)), Amount)
    assert isinstance(fixed_discount(amount_range, Amount(1, USD)), AmountRange)
    assert isinstance(fixed_discount(usd_taxed(10, 12), Amount(1, USD)), TaxedAmount)
    assert isinstance(fixed_discount(taxed_range, Amount(1, USD)), TaxedAmountRange)


def test_fixed_discount_in_yen():
    result = fixed_discount(Amount(45, "JPY"), Amount("23.45", "JPY"))

    assert result == Amount("21.55", JPY)


def test_fixed_discount_is_floored_at_zero_everywhere():
    taxed_range = TaxedAmountRange(usd_taxed(10, 12), usd_taxed(20, 24))

    result = fixed_discount(taxed_range, Amount(100, USD))

    assert result == TaxedAmountRange(usd_taxed(0, 0), usd_taxed(0, 0))


def test_fixed_discount_rejects_other_currency():
    with pytest.raises(CurrencyMismatchError):
        fixed_discount(usd_taxed(10, 12), Amount(1, JPY))


def test_percentage_discount_half_of_base():
    result = percentage_discount(Amount("566.64", "USD"), 50, from_gross=True)

    assert result == Amount("283.32", USD)


def test_fractional_discount_on_range_discounts_each_end_proportionally():
    amount_range = AmountRange(Amount("400.67", VND), Amount("800.2365", VND))

    # VND has 0 fraction digits: 400.67 * 0.135 = 54.09 -> 54; 800.2365 * 0.135 = 108.03 -> 108
    result = fractional_discount(amount_range, Decimal("0.135"), from_gross=True)

    assert result.start.value == Decimal("346.67")
    assert result.stop.value == Decimal("692.2365")


def test_fractional_discount_on_taxed_amount_uses_one_discount_for_both():
    # Discount from gross: 200 * 0.1 = 20, subtracted from net and gross
    result = fractional_discount(usd_taxed(100, 200), "0.1", from_gross=True)

    assert result == usd_taxed(80, 180)


def test_fractional_and_percentage_agree():
    base = TaxedAmountRange(usd_taxed("10.10", "12.12"), usd_taxed("20.20", "24.24"))

    assert fractional_discount(base, "0.15", from_gross=False) == percentage_discount(base, 15, from_gross=False)


@pytest.mark.parametrize("base", [None, 10, Decimal("10"), "10 USD"])
def test_unsupported_base(base):
    with pytest.raises((NilOperandError, UnsupportedOperandTypeError)):
        fixed_discount(base, Amount(1, USD))


def test_discount_must_be_amount():
    with pytest.raises(UnsupportedOperandTypeError):
        fixed_discount(Amount(10, USD), 1)


def test_fraction_must_be_numeric():
    with pytest.raises(UnsupportedOperandTypeError):
        fractional_discount(Amount(10, USD), Amount(1, USD))
    with pytest.raises(NilOperandError):
        percentage_discount(Amount(10, USD), None)
