from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from suite_prices.config import get_settings
from suite_prices.domain.monetary.currency import Currency
from suite_prices.domain.monetary.currency_registry import get_currency
from suite_prices.domain.monetary.errors import (
    CurrencyMismatchError,
    DivideByZeroError,
    NegativeAmountError,
    NegativeDivisorError,
    NilOperandError,
    QuantizeError,
    UnsupportedOperandTypeError,
)
from suite_prices.domain.monetary.operands import require_operand, require_scalar
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.utils.decimal_tools import DECIMAL_CONTEXT, DecimalLike, as_finite_decimal

logger = logging.getLogger(__name__)


class Amount:
    """Represents a non-negative monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. The value is stored exactly
    as given: construction never rounds to the currency precision, use
    `quantize` for that. Instances are immutable, every operation returns a
    new `Amount`.
    """

    def __init__(self, value: DecimalLike, currency: Currency | str):
        """Initialize Amount with value and currency.

        Args:
            value: Numeric value (Decimal-like scalar), must be >= 0.
            currency: `Currency` or ISO code in any letter case.

        Raises:
            NilOperandError: If $value or $currency is None.
            UnknownCurrencyError: If $currency is not a known ISO code.
            NegativeAmountError: If $value is below zero.
            ValueError: If $value is not a finite number or exceeds the configured maximum.
        """
        if value is None or currency is None:
            raise NilOperandError(f"Cannot init `Amount` because $value ({value}) or $currency ({currency}) is None")

        resolved_currency = get_currency(currency)
        decimal_value = as_finite_decimal(value)

        # Raise: value must not be negative
        if decimal_value < 0:
            raise NegativeAmountError(f"$value must be >= 0, but provided value is: {decimal_value}")

        # Raise: value must be within allowed range
        max_amount = get_settings().max_amount
        if decimal_value > max_amount:
            raise ValueError(f"$value exceeds maximum allowed value {max_amount}, but provided value is: {decimal_value}")

        # Normalize negative zero
        self._value = decimal_value.copy_abs() if decimal_value.is_zero() else decimal_value
        self._currency = resolved_currency

    @classmethod
    def zero(cls, currency: Currency | str) -> Amount:
        """Create a zero amount in $currency."""
        return cls(Decimal(0), currency)

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def _check_same_currency(self, other: Amount) -> None:
        """Check if two Amount objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    # region Arithmetic

    def add(self, other: Amount) -> Amount:
        """Add two amounts of the same currency."""
        require_operand("add", other, Amount)
        self._check_same_currency(other)
        return Amount(DECIMAL_CONTEXT.add(self.value, other.value), self.currency)

    def sub(self, other: Amount) -> Amount:
        """Subtract $other from this amount.

        Raises:
            NegativeAmountError: If $other is greater than this amount. Use
                `apply_fixed_discount` for subtraction floored at zero.
        """
        require_operand("sub", other, Amount)
        self._check_same_currency(other)
        result = DECIMAL_CONTEXT.subtract(self.value, other.value)
        if result < 0:
            raise NegativeAmountError(f"Cannot call `sub` because result would be negative: {self} - {other} = {result}")
        return Amount(result, self.currency)

    def mul(self, scalar: DecimalLike) -> Amount:
        """Multiply by a number. Multiplying two amounts is not supported."""
        factor = require_scalar("mul", scalar)
        return Amount(DECIMAL_CONTEXT.multiply(self.value, factor), self.currency)

    def divide(self, divisor: DecimalLike | Amount) -> Amount | Decimal:
        """Divide by a number (returns Amount) or by an Amount (returns the Decimal ratio).

        Raises:
            DivideByZeroError: If $divisor is zero.
            NegativeDivisorError: If $divisor is a negative number.
            CurrencyMismatchError: If $divisor is an Amount in another currency.
        """
        if isinstance(divisor, Amount):
            self._check_same_currency(divisor)
            if divisor.is_zero():
                raise DivideByZeroError(f"Cannot call `divide` because $divisor is zero: {divisor}")
            return DECIMAL_CONTEXT.divide(self.value, divisor.value)

        factor = require_scalar("divide", divisor)
        if factor.is_zero():
            raise DivideByZeroError("Cannot call `divide` because $divisor is zero")
        if factor < 0:
            raise NegativeDivisorError(f"Cannot call `divide` because $divisor is negative: {factor}")
        return Amount(DECIMAL_CONTEXT.divide(self.value, factor), self.currency)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = divide

    def __radd__(self, other):
        """Right addition, so that `sum()` works on amounts (it starts from int 0)."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        raise UnsupportedOperandTypeError("add", other)

    # endregion

    # region Comparison

    def equal(self, other: Amount) -> bool:
        """Check value equality with another amount of the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        require_operand("equal", other, Amount)
        self._check_same_currency(other)
        return self.value == other.value

    def less_than(self, other: Amount) -> bool:
        require_operand("less_than", other, Amount)
        self._check_same_currency(other)
        return self.value < other.value

    def less_than_or_equal(self, other: Amount) -> bool:
        require_operand("less_than_or_equal", other, Amount)
        self._check_same_currency(other)
        return self.value <= other.value

    def greater_than(self, other: Amount) -> bool:
        require_operand("greater_than", other, Amount)
        self._check_same_currency(other)
        return self.value > other.value

    def greater_than_or_equal(self, other: Amount) -> bool:
        require_operand("greater_than_or_equal", other, Amount)
        self._check_same_currency(other)
        return self.value >= other.value

    __lt__ = less_than
    __le__ = less_than_or_equal
    __gt__ = greater_than
    __ge__ = greater_than_or_equal

    def __eq__(self, other) -> bool:
        """Check equality with another Amount; different currencies are never equal."""
        if not isinstance(other, Amount):
            return False
        if self.currency != other.currency:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        """Hash based on value and currency code."""
        return hash((self.value, self.currency.code))

    # endregion

    # region Rounding & discounts

    def quantize(self, rounding_mode: RoundingMode | str, precision: int | None = None) -> Amount:
        """Return a copy rounded to a fixed number of fraction digits.

        Args:
            rounding_mode: One of `RoundingMode` (or its name).
            precision: Number of fraction digits. If None or negative, the
                currency's own fraction digits are used (2 for USD, 0 for JPY).

        Returns:
            Amount: New instance with the same currency and rounded value.

        Raises:
            InvalidRoundingModeError: If $rounding_mode is not a rounding mode.
            UnsupportedOperandTypeError: If $precision is not an int.
            QuantizeError: If the result does not fit the shared decimal precision.
        """
        mode = RoundingMode.parse(rounding_mode)
        if precision is not None and (isinstance(precision, bool) or not isinstance(precision, int)):
            raise UnsupportedOperandTypeError("quantize", precision)

        digits = self.currency.precision if precision is None or precision < 0 else precision
        exponent = Decimal(1).scaleb(-digits)
        try:
            result = self.value.quantize(exponent, rounding=mode.decimal_rounding, context=DECIMAL_CONTEXT)
        except InvalidOperation as e:
            raise QuantizeError(
                f"Cannot call `quantize` because {self} with {digits} fraction digits needs more than "
                f"{DECIMAL_CONTEXT.prec} significant digits"
            ) from e
        return Amount(result, self.currency)

    def apply_fixed_discount(self, discount: Amount) -> Amount:
        """Subtract $discount, flooring the result at zero.

        Raises:
            CurrencyMismatchError: If $discount is in another currency.
        """
        require_operand("apply_fixed_discount", discount, Amount)
        self._check_same_currency(discount)

        remaining = DECIMAL_CONTEXT.subtract(self.value, discount.value)
        if remaining > 0:
            return Amount(remaining, self.currency)

        logger.debug(f"Fixed discount {discount} is not less than {self}; result clamped to zero")
        return Amount.zero(self.currency)

    def apply_fractional_discount(self, fraction: DecimalLike, from_gross: bool = True) -> Amount:
        """Discount by `self * fraction`, rounded down to the currency precision.

        $from_gross only matters for taxed amounts; a plain amount has no net/gross.
        """
        factor = require_scalar("apply_fractional_discount", fraction)
        discount = self.mul(factor).quantize(RoundingMode.DOWN)
        return self.apply_fixed_discount(discount)

    def apply_percentage_discount(self, percentage: DecimalLike, from_gross: bool = True) -> Amount:
        """Discount by $percentage percent (50 means half)."""
        percent = require_scalar("apply_percentage_discount", percentage)
        return self.apply_fractional_discount(DECIMAL_CONTEXT.divide(percent, Decimal(100)), from_gross)

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.value} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Amount(1000.50, USD)', the constructor-call form."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"
