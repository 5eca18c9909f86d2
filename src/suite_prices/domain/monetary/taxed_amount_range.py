from __future__ import annotations

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.amount_range import AmountRange
from suite_prices.domain.monetary.currency import Currency
from suite_prices.domain.monetary.errors import InvalidRangeError, UnsupportedOperandTypeError
from suite_prices.domain.monetary.operands import require_operand
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.domain.monetary.taxed_amount import TaxedAmount
from suite_prices.utils.decimal_tools import DecimalLike


class TaxedAmountRange:
    """Represents a range of taxed amounts [start, stop] in one currency.

    Ends are ordered by gross amount, same as `TaxedAmount.less_than`.
    """

    def __init__(self, start: TaxedAmount, stop: TaxedAmount):
        """Initialize TaxedAmountRange.

        Raises:
            NilOperandError: If $start or $stop is None.
            UnsupportedOperandTypeError: If $start or $stop is not a TaxedAmount.
            InvalidRangeError: If ends have different currencies or $stop is less than $start.
        """
        require_operand("TaxedAmountRange", start, TaxedAmount)
        require_operand("TaxedAmountRange", stop, TaxedAmount)

        # Raise: both ends must share one currency
        if start.currency != stop.currency:
            raise InvalidRangeError(f"Cannot init `TaxedAmountRange` because $start ({start}) and $stop ({stop}) have different currencies")

        # Raise: range must not be inverted (compared by gross)
        if stop.less_than(start):
            raise InvalidRangeError(f"Cannot init `TaxedAmountRange` because $stop ({stop}) is less than $start ({start})")

        self._start = start
        self._stop = stop

    @property
    def start(self) -> TaxedAmount:
        return self._start

    @property
    def stop(self) -> TaxedAmount:
        return self._stop

    @property
    def currency(self) -> Currency:
        return self._start.currency

    # region Arithmetic

    def add(self, other: Amount | TaxedAmount | AmountRange | TaxedAmountRange) -> TaxedAmountRange:
        """Add to both ends.

        An `Amount` or `TaxedAmount` is added to each end; an `AmountRange` or
        `TaxedAmountRange` is added end-wise (start to start, stop to stop).
        """
        require_operand("add", other, (Amount, TaxedAmount, AmountRange, TaxedAmountRange))
        if isinstance(other, (AmountRange, TaxedAmountRange)):
            return TaxedAmountRange(self.start.add(other.start), self.stop.add(other.stop))
        return TaxedAmountRange(self.start.add(other), self.stop.add(other))

    def sub(self, other: Amount | TaxedAmount | AmountRange | TaxedAmountRange) -> TaxedAmountRange:
        """Subtract from both ends, with the same operand rules as `add`."""
        require_operand("sub", other, (Amount, TaxedAmount, AmountRange, TaxedAmountRange))
        if isinstance(other, (AmountRange, TaxedAmountRange)):
            return TaxedAmountRange(self.start.sub(other.start), self.stop.sub(other.stop))
        return TaxedAmountRange(self.start.sub(other), self.stop.sub(other))

    def mul(self, scalar: DecimalLike) -> TaxedAmountRange:
        return TaxedAmountRange(self.start.mul(scalar), self.stop.mul(scalar))

    def divide(self, divisor: DecimalLike) -> TaxedAmountRange:
        if isinstance(divisor, (Amount, TaxedAmount, AmountRange, TaxedAmountRange)):
            raise UnsupportedOperandTypeError("divide", divisor)
        return TaxedAmountRange(self.start.divide(divisor), self.stop.divide(divisor))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = divide

    # endregion

    # region Comparison

    def equal(self, other: TaxedAmountRange) -> bool:
        """Check that both ends are equal (net and gross).

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        require_operand("equal", other, TaxedAmountRange)
        return self.start.equal(other.start) and self.stop.equal(other.stop)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaxedAmountRange):
            return False
        return self.start == other.start and self.stop == other.stop

    def __hash__(self) -> int:
        return hash((self.start, self.stop))

    def contains(self, item: TaxedAmount) -> bool:
        """Check if `start <= item <= stop`. A taxed amount in another currency is never contained."""
        require_operand("contains", item, TaxedAmount)
        if item.currency != self.currency:
            return False
        return self.start.less_than_or_equal(item) and item.less_than_or_equal(self.stop)

    def __contains__(self, item) -> bool:
        return self.contains(item)

    # endregion

    # region Rounding, replacing & discounts

    def quantize(self, rounding_mode: RoundingMode | str, precision: int | None = None) -> TaxedAmountRange:
        """Return a copy of the range with start and stop quantized.

        All arguments are passed to `TaxedAmount.quantize`.
        """
        return TaxedAmountRange(self.start.quantize(rounding_mode, precision), self.stop.quantize(rounding_mode, precision))

    def replace(self, start: TaxedAmount | None = None, stop: TaxedAmount | None = None) -> TaxedAmountRange:
        """Return a range with $start and/or $stop replaced; omitted ends are kept."""
        return TaxedAmountRange(self.start if start is None else start, self.stop if stop is None else stop)

    def apply_fixed_discount(self, discount: Amount) -> TaxedAmountRange:
        return TaxedAmountRange(self.start.apply_fixed_discount(discount), self.stop.apply_fixed_discount(discount))

    def apply_fractional_discount(self, fraction: DecimalLike, from_gross: bool = True) -> TaxedAmountRange:
        start = self.start.apply_fractional_discount(fraction, from_gross)
        stop = self.stop.apply_fractional_discount(fraction, from_gross)
        return TaxedAmountRange(start, stop)

    def apply_percentage_discount(self, percentage: DecimalLike, from_gross: bool = True) -> TaxedAmountRange:
        start = self.start.apply_percentage_discount(percentage, from_gross)
        stop = self.stop.apply_percentage_discount(percentage, from_gross)
        return TaxedAmountRange(start, stop)

    # endregion

    def __str__(self) -> str:
        return f"[{self.start}] - [{self.stop}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.start!r}, {self.stop!r})"
