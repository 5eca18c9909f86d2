from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

ENV_DECIMAL_PRECISION = "SUITE_PRICES_DECIMAL_PRECISION"
ENV_MAX_AMOUNT = "SUITE_PRICES_MAX_AMOUNT"

DEFAULT_DECIMAL_PRECISION = 28
DEFAULT_MAX_AMOUNT = Decimal("999_999_999_999_999.999999999999999999")


@dataclass(frozen=True)
class PricesSettings:
    """Process-wide numeric settings.

    Attributes:
        decimal_precision: Number of significant digits used by the shared decimal context.
        max_amount: Largest value accepted when constructing an `Amount`.
    """

    decimal_precision: int = DEFAULT_DECIMAL_PRECISION
    max_amount: Decimal = DEFAULT_MAX_AMOUNT

    def __post_init__(self):
        # Raise: precision must leave room for the fraction digits of every registered currency
        if not isinstance(self.decimal_precision, int) or self.decimal_precision < 1:
            raise ValueError(f"$decimal_precision must be a positive integer, but provided value is: {self.decimal_precision}")

        # Raise: max_amount must be a positive finite Decimal
        if not isinstance(self.max_amount, Decimal) or not self.max_amount.is_finite() or self.max_amount <= 0:
            raise ValueError(f"$max_amount must be a positive finite Decimal, but provided value is: {self.max_amount}")


def load_settings(dotenv_path: str | None = None) -> PricesSettings:
    """Build `PricesSettings` from environment variables.

    Values are also read from a `.env` file (via python-dotenv) without copying
    the file into `os.environ`. Variables already present in the environment
    take precedence over values from the file.

    Args:
        dotenv_path: Optional explicit path to a `.env` file. If None, python-dotenv
            searches for `.env` starting from the current working directory.

    Returns:
        PricesSettings: Settings with defaults applied for missing variables.

    Raises:
        ValueError: If a variable is present but cannot be parsed.
    """
    file_values = dotenv_values(dotenv_path or find_dotenv(usecwd=True))

    raw_precision = os.environ.get(ENV_DECIMAL_PRECISION, file_values.get(ENV_DECIMAL_PRECISION))
    raw_max_amount = os.environ.get(ENV_MAX_AMOUNT, file_values.get(ENV_MAX_AMOUNT))

    decimal_precision = DEFAULT_DECIMAL_PRECISION
    if raw_precision is not None and raw_precision.strip():
        try:
            decimal_precision = int(raw_precision)
        except ValueError as e:
            raise ValueError(f"Cannot call `load_settings` because ${ENV_DECIMAL_PRECISION} ('{raw_precision}') is not an integer") from e

    max_amount = DEFAULT_MAX_AMOUNT
    if raw_max_amount is not None and raw_max_amount.strip():
        try:
            max_amount = Decimal(raw_max_amount.strip())
        except InvalidOperation as e:
            raise ValueError(f"Cannot call `load_settings` because ${ENV_MAX_AMOUNT} ('{raw_max_amount}') is not a decimal number") from e

    result = PricesSettings(decimal_precision=decimal_precision, max_amount=max_amount)
    logger.debug(f"Loaded settings: decimal_precision={result.decimal_precision}, max_amount={result.max_amount}")
    return result


@lru_cache(maxsize=1)
def get_settings() -> PricesSettings:
    """Return settings loaded once per process."""
    return load_settings()
