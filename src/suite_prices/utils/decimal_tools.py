from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import TypeAlias

from suite_prices.config import get_settings

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Shared arithmetic context; never mutated after creation, so it is safe to use from any thread
DECIMAL_CONTEXT = Context(prec=get_settings().decimal_precision, rounding=ROUND_HALF_EVEN)


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not one of the `DecimalLike` types.
        InvalidOperation: If a string cannot be parsed as a decimal number.
    """
    if isinstance(value, Decimal):
        return value

    # `bool` is a subclass of `int` but never a meaningful quantity
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    return Decimal(str(value).strip())


def as_finite_decimal(value: DecimalLike) -> Decimal:
    """Like `as_decimal`, but also rejects NaN and infinities.

    Raises:
        ValueError: If $value cannot be converted or is not finite.
    """
    try:
        result = as_decimal(value)
    except (TypeError, InvalidOperation) as e:
        raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result
