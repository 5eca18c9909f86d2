from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_UP
from enum import Enum

from suite_prices.domain.monetary.errors import InvalidRoundingModeError


class RoundingMode(Enum):
    """Represents how a value is rounded when quantized.

    Members:
        UP: Away from zero.
        DOWN: Toward zero.
        CEILING: Toward positive infinity.
        FLOOR: Toward negative infinity.
    """

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"

    @property
    def decimal_rounding(self) -> str:
        """Get the matching `decimal` module rounding constant."""
        return _DECIMAL_ROUNDING[self]

    @classmethod
    def parse(cls, value: RoundingMode | str) -> RoundingMode:
        """Resolve $value into a `RoundingMode`.

        Accepts a `RoundingMode` member or its name in any letter case ("up", "Floor").

        Raises:
            InvalidRoundingModeError: If $value does not name a rounding mode.
        """
        if isinstance(value, RoundingMode):
            return value

        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]

        raise InvalidRoundingModeError(f"$rounding_mode must be one of {[m.name for m in cls]}, but provided value is: {value!r}")


# Single source of truth for the decimal mapping
_DECIMAL_ROUNDING = {
    RoundingMode.UP: ROUND_UP,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
}
