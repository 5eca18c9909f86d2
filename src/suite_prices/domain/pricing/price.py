from __future__ import annotations

from typing import TypeAlias

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.amount_range import AmountRange
from suite_prices.domain.monetary.operands import require_operand
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.domain.monetary.taxed_amount import TaxedAmount
from suite_prices.domain.monetary.taxed_amount_range import TaxedAmountRange

# Closed set of price values accepted by the pricing functions
PriceValue: TypeAlias = Amount | AmountRange | TaxedAmount | TaxedAmountRange

PRICE_TYPES: tuple[type, ...] = (Amount, AmountRange, TaxedAmount, TaxedAmountRange)


def require_price(operation: str, price: PriceValue) -> PriceValue:
    """Return $price if it is one of the four price types.

    Raises:
        NilOperandError: If $price is None.
        UnsupportedOperandTypeError: If $price has any other type.
    """
    return require_operand(operation, price, PRICE_TYPES)


def quantize_price(price: PriceValue, rounding_mode: RoundingMode | str, precision: int | None = None) -> PriceValue:
    """Quantize any price value, returning the same type.

    Useful when holding a price whose concrete type is only known at runtime.
    Composite values quantize every contained `Amount`.

    Args:
        price: `Amount`, `AmountRange`, `TaxedAmount` or `TaxedAmountRange`.
        rounding_mode: One of `RoundingMode` (or its name).
        precision: Fraction digits; None or negative means the currency's own.

    Raises:
        UnsupportedOperandTypeError: If $price is not a price value.
    """
    require_price("quantize_price", price)
    return price.quantize(rounding_mode, precision)
