from __future__ import annotations

from decimal import Decimal

from suite_prices.domain.monetary.amount import Amount
from suite_prices.domain.monetary.currency import Currency
from suite_prices.domain.monetary.errors import CurrencyMismatchError, UnsupportedOperandTypeError
from suite_prices.domain.monetary.operands import require_operand, require_scalar
from suite_prices.domain.monetary.rounding import RoundingMode
from suite_prices.utils.decimal_tools import DECIMAL_CONTEXT, DecimalLike


class TaxedAmount:
    """Represents a taxed amount: a net (tax-exclusive) and gross (tax-inclusive) pair.

    Both components share one currency. `gross >= net` is not enforced.

    Ordering uses the gross amount only (what the customer pays), while
    equality requires both net and gross to match.
    """

    def __init__(self, net: Amount, gross: Amount):
        """Initialize TaxedAmount.

        Raises:
            NilOperandError: If $net or $gross is None.
            UnsupportedOperandTypeError: If $net or $gross is not an Amount.
            CurrencyMismatchError: If $net and $gross have different currencies.
        """
        require_operand("TaxedAmount", net, Amount)
        require_operand("TaxedAmount", gross, Amount)

        # Raise: net and gross must share one currency
        if net.currency != gross.currency:
            raise CurrencyMismatchError(net.currency, gross.currency)

        self._net = net
        self._gross = gross

    @property
    def net(self) -> Amount:
        return self._net

    @property
    def gross(self) -> Amount:
        return self._gross

    @property
    def currency(self) -> Currency:
        return self._net.currency

    @property
    def tax(self) -> Amount:
        """Get the tax part, `gross - net`.

        Raises:
            NegativeAmountError: If gross is less than net.
        """
        return self.gross.sub(self.net)

    # region Arithmetic

    def add(self, other: Amount | TaxedAmount) -> TaxedAmount:
        """Add an amount to both net and gross, or another taxed amount component-wise."""
        require_operand("add", other, (Amount, TaxedAmount))
        if isinstance(other, TaxedAmount):
            return TaxedAmount(self.net.add(other.net), self.gross.add(other.gross))
        return TaxedAmount(self.net.add(other), self.gross.add(other))

    def sub(self, other: Amount | TaxedAmount) -> TaxedAmount:
        """Subtract an amount from both net and gross, or another taxed amount component-wise."""
        require_operand("sub", other, (Amount, TaxedAmount))
        if isinstance(other, TaxedAmount):
            return TaxedAmount(self.net.sub(other.net), self.gross.sub(other.gross))
        return TaxedAmount(self.net.sub(other), self.gross.sub(other))

    def mul(self, scalar: DecimalLike) -> TaxedAmount:
        return TaxedAmount(self.net.mul(scalar), self.gross.mul(scalar))

    def divide(self, divisor: DecimalLike) -> TaxedAmount:
        if isinstance(divisor, (Amount, TaxedAmount)):
            raise UnsupportedOperandTypeError("divide", divisor)
        return TaxedAmount(self.net.divide(divisor), self.gross.divide(divisor))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = divide

    # endregion

    # region Comparison

    def less_than(self, other: TaxedAmount) -> bool:
        """Compare by gross amount.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        require_operand("less_than", other, TaxedAmount)
        return self.gross.less_than(other.gross)

    def equal(self, other: TaxedAmount) -> bool:
        """Check that both net and gross are equal.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        require_operand("equal", other, TaxedAmount)
        return self.net.equal(other.net) and self.gross.equal(other.gross)

    def less_than_or_equal(self, other: TaxedAmount) -> bool:
        """Compare by gross amount, consistent with `less_than`."""
        require_operand("less_than_or_equal", other, TaxedAmount)
        return self.gross.less_than_or_equal(other.gross)

    def greater_than(self, other: TaxedAmount) -> bool:
        require_operand("greater_than", other, TaxedAmount)
        return other.less_than(self)

    def greater_than_or_equal(self, other: TaxedAmount) -> bool:
        require_operand("greater_than_or_equal", other, TaxedAmount)
        return self.gross.greater_than_or_equal(other.gross)

    __lt__ = less_than
    __le__ = less_than_or_equal
    __gt__ = greater_than
    __ge__ = greater_than_or_equal

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaxedAmount):
            return False
        return self.net == other.net and self.gross == other.gross

    def __hash__(self) -> int:
        return hash((self.net, self.gross))

    # endregion

    # region Rounding & discounts

    def quantize(self, rounding_mode: RoundingMode | str, precision: int | None = None) -> TaxedAmount:
        """Return a copy with net and gross quantized.

        All arguments are passed to `Amount.quantize`.
        """
        return TaxedAmount(self.net.quantize(rounding_mode, precision), self.gross.quantize(rounding_mode, precision))

    def apply_fixed_discount(self, discount: Amount) -> TaxedAmount:
        """Subtract $discount from both net and gross, each floored at zero."""
        return TaxedAmount(self.net.apply_fixed_discount(discount), self.gross.apply_fixed_discount(discount))

    def apply_fractional_discount(self, fraction: DecimalLike, from_gross: bool = True) -> TaxedAmount:
        """Apply a fractional discount based on either the gross or the net amount.

        One discount amount is computed from the chosen base (rounded down to
        the currency precision) and that same amount is subtracted from both
        net and gross. Net and gross are therefore not discounted
        proportionally to each other.
        """
        factor = require_scalar("apply_fractional_discount", fraction)
        base = self.gross if from_gross else self.net
        discount = base.mul(factor).quantize(RoundingMode.DOWN)
        return self.apply_fixed_discount(discount)

    def apply_percentage_discount(self, percentage: DecimalLike, from_gross: bool = True) -> TaxedAmount:
        percent = require_scalar("apply_percentage_discount", percentage)
        return self.apply_fractional_discount(DECIMAL_CONTEXT.divide(percent, Decimal(100)), from_gross)

    # endregion

    def __str__(self) -> str:
        return f"net={self.net}, gross={self.gross}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(net={self.net!r}, gross={self.gross!r})"
