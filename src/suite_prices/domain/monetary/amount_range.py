from __future__ import annotations

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.currency import Currency
from suite_prices.domain.monetary.errors import InvalidRangeError, UnsupportedOperandTypeError
from suite_prices.domain.monetary.operands import require_operand
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.utils.decimal_tools import DecimalLike


class AmountRange:
    """Represents a closed range of amounts [start, stop] in one currency.

    Every operation is applied to both ends independently and the result is
    rebuilt through the constructor, so a result whose ends come out of order
    raises `InvalidRangeError` instead of producing an invalid range.
    """

    def __init__(self, start: Amount, stop: Amount):
        """Initialize AmountRange.

        Raises:
            NilOperandError: If $start or $stop is None.
            UnsupportedOperandTypeError: If $start or $stop is not an Amount.
            InvalidRangeError: If ends have different currencies or $stop < $start.
        """
        require_operand("AmountRange", start, Amount)
        require_operand("AmountRange", stop, Amount)

        # Raise: both ends must share one currency
        if start.currency != stop.currency:
            raise InvalidRangeError(f"Cannot init `AmountRange` because $start ({start}) and $stop ({stop}) have different currencies")

        # Raise: range must not be inverted
        if stop.value < start.value:
            raise InvalidRangeError(f"Cannot init `AmountRange` because $stop ({stop}) is less than $start ({start})")

        self._start = start
        self._stop = stop

    @property
    def start(self) -> Amount:
        return self._start

    @property
    def stop(self) -> Amount:
        return self._stop

    @property
    def currency(self) -> Currency:
        return self._start.currency

    # region Arithmetic

    def add(self, other: Amount | AmountRange) -> AmountRange:
        """Add an amount to both ends, or another range end-wise."""
        require_operand("add", other, (Amount, AmountRange))
        if isinstance(other, AmountRange):
            return AmountRange(self.start.add(other.start), self.stop.add(other.stop))
        return AmountRange(self.start.add(other), self.stop.add(other))

    def sub(self, other: Amount | AmountRange) -> AmountRange:
        """Subtract an amount from both ends, or another range end-wise."""
        require_operand("sub", other, (Amount, AmountRange))
        if isinstance(other, AmountRange):
            return AmountRange(self.start.sub(other.start), self.stop.sub(other.stop))
        return AmountRange(self.start.sub(other), self.stop.sub(other))

    def mul(self, scalar: DecimalLike) -> AmountRange:
        return AmountRange(self.start.mul(scalar), self.stop.mul(scalar))

    def divide(self, divisor: DecimalLike) -> AmountRange:
        if isinstance(divisor, (Amount, AmountRange)):
            raise UnsupportedOperandTypeError("divide", divisor)
        return AmountRange(self.start.divide(divisor), self.stop.divide(divisor))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = divide

    # endregion

    # region Comparison

    def equal(self, other: AmountRange) -> bool:
        """Check that both ends are equal.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        require_operand("equal", other, AmountRange)
        return self.start.equal(other.start) and self.stop.equal(other.stop)

    def less_than(self, other: AmountRange) -> bool:
        """Check that both ends are strictly less than the ends of $other."""
        require_operand("less_than", other, AmountRange)
        return self.start.less_than(other.start) and self.stop.less_than(other.stop)

    def less_than_or_equal(self, other: AmountRange) -> bool:
        return self.less_than(other) or self.equal(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AmountRange):
            return False
        return self.start == other.start and self.stop == other.stop

    def __hash__(self) -> int:
        return hash((self.start, self.stop))

    def contains(self, item: Amount) -> bool:
        """Check if `start <= item <= stop`. An amount in another currency is never contained."""
        require_operand("contains", item, Amount)
        if item.currency != self.currency:
            return False
        return self.start.less_than_or_equal(item) and item.less_than_or_equal(self.stop)

    def __contains__(self, item) -> bool:
        return self.contains(item)

    # endregion

    # region Rounding, replacing & discounts

    def quantize(self, rounding_mode: RoundingMode | str, precision: int | None = None) -> AmountRange:
        """Return a copy of the range with start and stop quantized.

        All arguments are passed to `Amount.quantize`.
        """
        return AmountRange(self.start.quantize(rounding_mode, precision), self.stop.quantize(rounding_mode, precision))

    def replace(self, start: Amount | None = None, stop: Amount | None = None) -> AmountRange:
        """Return a range with $start and/or $stop replaced; omitted ends are kept."""
        return AmountRange(self.start if start is None else start, self.stop if stop is None else stop)

    def apply_fixed_discount(self, discount: Amount) -> AmountRange:
        return AmountRange(self.start.apply_fixed_discount(discount), self.stop.apply_fixed_discount(discount))

    def apply_fractional_discount(self, fraction: DecimalLike, from_gross: bool = True) -> AmountRange:
        start = self.start.apply_fractional_discount(fraction, from_gross)
        stop = self.stop.apply_fractional_discount(fraction, from_gross)
        return AmountRange(start, stop)

    def apply_percentage_discount(self, percentage: DecimalLike, from_gross: bool = True) -> AmountRange:
        start = self.start.apply_percentage_discount(percentage, from_gross)
        stop = self.stop.apply_percentage_discount(percentage, from_gross)
        return AmountRange(start, stop)

    # endregion

    def __str__(self) -> str:
        return f"{self.start} - {self.stop}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.start!r}, {self.stop!r})"
