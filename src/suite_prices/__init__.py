__version__ = "0.1.0"

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.amount_range import AmountRange
from suite_prices.domain.monetary.taxed_amount import TaxedAmount
from suite_prices.domain.monetary.taxed_amount_range import TaxedAmountRange
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.domain.monetary.currency_registry import fraction_digits, validate_currency
from suite_prices.domain.pricing.discount import fixed_discount, fractional_discount, percentage_discount
from suite_prices.domain.pricing.price import PriceValue, quantize_price

__all__ = [
    "Amount",
    "AmountRange",
    "TaxedAmount",
    "TaxedAmountRange",
    "RoundingMode",
    "PriceValue",
    "validate_currency",
    "fraction_digits",
    "quantize_price",
    "fixed_discount",
    "fractional_discount",
    "percentage_discount",
]
