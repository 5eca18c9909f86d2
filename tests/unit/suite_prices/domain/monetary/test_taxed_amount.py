from __future__ import annotations

from decimal import Decimal

import pytest

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.currency_registry import EUR, USD
from suite_prices.domain.monetary.errors import (
    CurrencyMismatchError,
    NegativeAmountError,
    UnsupportedOperandTypeError,
)
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.domain.monetary.taxed_amount import TaxedAmount


def usd_taxed(net, gross) -> TaxedAmount:
    return TaxedAmount(Amount(net, USD), Amount(gross, USD))


def test_tax_is_gross_minus_net():
    taxed = usd_taxed(100, 123)

    assert taxed.tax == Amount(23, USD)
    assert taxed.tax.equal(taxed.gross.sub(taxed.net))
    assert taxed.currency == USD


def test_gross_below_net_is_allowed_but_tax_fails():
    taxed = usd_taxed(10, 9)

    with pytest.raises(NegativeAmountError):
        taxed.tax


def test_mixed_currency_is_rejected():
    with pytest.raises(CurrencyMismatchError):
        TaxedAmount(Amount(1, USD), Amount(1, EUR))


def test_components_must_be_amounts():
    with pytest.raises(UnsupportedOperandTypeError):
        TaxedAmount(Amount(1, USD), "1")


# region Arithmetic


def test_add_amount_to_net_and_gross():
    assert usd_taxed(10, 12) + Amount(1, USD) == usd_taxed(11, 13)


def test_add_taxed_amount_component_wise():
    assert usd_taxed(10, 12) + usd_taxed(1, 2) == usd_taxed(11, 14)


def test_sub():
    assert usd_taxed(10, 12) - Amount(1, USD) == usd_taxed(9, 11)
    assert usd_taxed(10, 12) - usd_taxed(1, 2) == usd_taxed(9, 10)


def test_mul_and_divide():
    assert usd_taxed(10, 12) * 3 == usd_taxed(30, 36)
    assert usd_taxed(10, 12) / 2 == usd_taxed(5, 6)


def test_divide_by_taxed_amount_is_not_supported():
    with pytest.raises(UnsupportedOperandTypeError):
        usd_taxed(10, 12) / usd_taxed(1, 1)


# endregion

# region Comparison


def test_ordering_uses_gross_only():
    cheaper_gross = usd_taxed(100, 110)
    pricier_gross = usd_taxed(50, 120)

    assert cheaper_gross.less_than(pricier_gross)
    assert cheaper_gross < pricier_gross
    assert pricier_gross > cheaper_gross


def test_equality_uses_net_and_gross():
    assert usd_taxed(10, 12).equal(usd_taxed(10, 12))
    # Same gross, different net
    assert not usd_taxed(9, 12).equal(usd_taxed(10, 12))
    assert usd_taxed(9, 12) != usd_taxed(10, 12)


def test_same_gross_different_net_orders_by_gross_only():
    a = usd_taxed(9, 12)
    b = usd_taxed(10, 12)

    assert not a < b
    assert not a > b
    assert a <= b
    assert a >= b
    assert a != b


def test_comparison_rejects_other_currency():
    other = TaxedAmount(Amount(1, EUR), Amount(1, EUR))

    with pytest.raises(CurrencyMismatchError):
        usd_taxed(1, 1).less_than(other)
    with pytest.raises(CurrencyMismatchError):
        usd_taxed(1, 1).equal(other)


# endregion

# region Quantize & discounts


def test_quantize_net_and_gross():
    result = usd_taxed("10.001", "12.309").quantize(RoundingMode.FLOOR)

    assert result == usd_taxed("10.00", "12.30")


def test_fixed_discount_applies_to_both_components():
    assert usd_taxed(10, 12).apply_fixed_discount(Amount(11, USD)) == usd_taxed(0, 1)


def test_fractional_discount_from_gross_subtracts_same_amount_from_both():
    # Discount = 120 * 0.25 = 30, subtracted from net and gross alike
    result = usd_taxed(100, 120).apply_fractional_discount(Decimal("0.25"), from_gross=True)

    assert result == usd_taxed(70, 90)


def test_fractional_discount_from_net():
    # Discount = 100 * 0.25 = 25
    result = usd_taxed(100, 120).apply_fractional_discount(Decimal("0.25"), from_gross=False)

    assert result == usd_taxed(75, 95)


def test_fractional_discount_is_rounded_down():
    # Discount = 10.01 * 0.5 = 5.005 -> 5.00
    result = usd_taxed("8.00", "10.01").apply_fractional_discount("0.5")

    assert result.net.value == Decimal("3.00")
    assert result.gross.value == Decimal("5.01")


def test_percentage_discount():
    assert usd_taxed(100, 120).apply_percentage_discount(10, from_gross=False) == usd_taxed(90, 110)


# endregion


def test_string_representations():
    assert str(usd_taxed(1, 2)) == "net=1 USD, gross=2 USD"
    assert repr(usd_taxed(1, 2)) == "TaxedAmount(net=Amount(1, USD), gross=Amount(2, USD))"
