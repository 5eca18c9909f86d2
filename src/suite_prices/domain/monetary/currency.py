from enum import Enum


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    COMMODITY = "COMMODITY"
    FUND = "FUND"


class Currency:
    """Represents an ISO 4217 currency.

    Instances are immutable. Look them up through `currency_registry` rather
    than constructing new ones, so that only known codes are ever used.

    Attributes:
        code (str): Alphabetic code (e.g., "USD", "JPY").
        numeric_code (str): Three-digit numeric code (e.g., "840").
        precision (int): Number of fraction digits (minor units, 0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, COMMODITY, FUND).
    """

    def __init__(self, code: str, numeric_code: str, precision: int, name: str, currency_type: CurrencyType = CurrencyType.FIAT):
        """Initialize a Currency instance.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(code, str) or len(code.strip()) != 3 or not code.strip().isalpha():
            raise ValueError(f"$code must be a 3-letter string, but provided value is: '{code}'")

        if not isinstance(numeric_code, str) or len(numeric_code) != 3 or not numeric_code.isdigit():
            raise ValueError(f"$numeric_code must be a 3-digit string, but provided value is: '{numeric_code}'")

        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._numeric_code = numeric_code
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def numeric_code(self) -> str:
        """Get the ISO numeric code."""
        return self._numeric_code

    @property
    def precision(self) -> int:
        """Get the number of fraction digits."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def is_fiat(self) -> bool:
        return self._currency_type == CurrencyType.FIAT

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', '{self.numeric_code}', {self.precision}, '{self.name}', {self.currency_type})"
