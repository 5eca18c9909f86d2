from __future__ import annotations

from decimal import Decimal, InvalidOperation

import pytest

from suite_prices.utils.decimal_tools import DECIMAL_CONTEXT, as_decimal, as_finite_decimal


@pytest.mark.parametrize(
    "value, expected",
    [(Decimal("1.10"), Decimal("1.10")), (2, Decimal("2")), ("3.30", Decimal("3.30")), (0.1, Decimal("0.1"))],
)
def test_as_decimal(value, expected):
    assert as_decimal(value) == expected


def test_as_decimal_rejects_other_types():
    with pytest.raises(TypeError):
        as_decimal(True)
    with pytest.raises(TypeError):
        as_decimal([1])
    with pytest.raises(InvalidOperation):
        as_decimal("abc")


@pytest.mark.parametrize("value", ["NaN", "-Infinity", "abc", None])
def test_as_finite_decimal_rejects(value):
    with pytest.raises(ValueError):
        as_finite_decimal(value)


def test_shared_context_does_not_follow_thread_context():
    # 1/3 is computed with the shared precision, not the default thread context
    assert len(DECIMAL_CONTEXT.divide(Decimal(1), Decimal(3)).as_tuple().digits) == DECIMAL_CONTEXT.prec
