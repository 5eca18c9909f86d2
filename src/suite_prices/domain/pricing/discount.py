from __future__ import annotations

import logging

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.operands import require_operand, require_scalar
from suite_prices.domain.pricing.price import PriceValue, require_price
from suite_prices.utils.decimal_tools import DecimalLike

logger = logging.getLogger(__name__)


def fixed_discount(base: PriceValue, discount: Amount) -> PriceValue:
    """Apply a fixed discount to any price value.

    Ranges discount both ends, taxed amounts discount net and gross, each
    with the same $discount. No amount goes below zero.

    Args:
        base: `Amount`, `AmountRange`, `TaxedAmount` or `TaxedAmountRange`.
        discount: Amount to subtract, in the same currency as $base.

    Returns:
        PriceValue: Discounted value of the same type as $base.

    Raises:
        CurrencyMismatchError: If $discount is in another currency.
        InvalidRangeError: If a discounted range comes out inverted.
        UnsupportedOperandTypeError: If $base is not a price value or $discount is not an Amount.
    """
    require_price("fixed_discount", base)
    require_operand("fixed_discount", discount, Amount)

    result = base.apply_fixed_discount(discount)
    logger.debug(f"Applied fixed discount {discount} to {base!r}: {result!r}")
    return result


def fractional_discount(base: PriceValue, fraction: DecimalLike, from_gross: bool = True) -> PriceValue:
    """Apply a fractional discount based on either the gross or the net amount.

    The discount for each `Amount` (or for each `TaxedAmount`, from its gross
    or net side) is `base * fraction` rounded down to the currency precision,
    then applied as a fixed discount.

    Args:
        base: `Amount`, `AmountRange`, `TaxedAmount` or `TaxedAmountRange`.
        fraction: Share of the base to take off (0.2 means 20 %).
        from_gross: For taxed values, compute the discount from gross (True) or net (False).

    Returns:
        PriceValue: Discounted value of the same type as $base.
    """
    require_price("fractional_discount", base)
    factor = require_scalar("fractional_discount", fraction)

    result = base.apply_fractional_discount(factor, from_gross)
    logger.debug(f"Applied fractional discount {factor} (from_gross={from_gross}) to {base!r}: {result!r}")
    return result


def percentage_discount(base: PriceValue, percentage: DecimalLike, from_gross: bool = True) -> PriceValue:
    """Apply a percentage discount based on either the gross or the net amount.

    Same as `fractional_discount` with `fraction = percentage / 100`.
    """
    require_price("percentage_discount", base)
    percent = require_scalar("percentage_discount", percentage)

    result = base.apply_percentage_discount(percent, from_gross)
    logger.debug(f"Applied percentage discount {percent}% (from_gross={from_gross}) to {base!r}: {result!r}")
    return result
