from __future__ import annotations

from decimal import Decimal

from suite_prices.domain.monetary.errors import NilOperandError, UnsupportedOperandTypeError
from suite_prices.utils.decimal_tools import DecimalLike, as_finite_decimal


def require_operand(operation: str, operand, accepted: type | tuple[type, ...]):
    """Return $operand if it is an instance of $accepted.

    Raises:
        NilOperandError: If $operand is None.
        UnsupportedOperandTypeError: If $operand has any other type.
    """
    if operand is None:
        raise NilOperandError(f"Cannot call `{operation}` because operand is None")
    if not isinstance(operand, accepted):
        raise UnsupportedOperandTypeError(operation, operand)
    return operand


def require_scalar(operation: str, scalar: DecimalLike) -> Decimal:
    """Convert a numeric operand of $operation into a finite `Decimal`.

    Raises:
        NilOperandError: If $scalar is None.
        UnsupportedOperandTypeError: If $scalar is not Decimal, int, float or str.
        ValueError: If $scalar is a string that is not a number, or is NaN/infinite.
    """
    if isinstance(scalar, bool):
        raise UnsupportedOperandTypeError(operation, scalar)
    require_operand(operation, scalar, (Decimal, int, float, str))
    return as_finite_decimal(scalar)
