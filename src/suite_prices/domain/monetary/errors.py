"""
Exception types for the monetary domain.

Every error derives from `PriceError` and from the closest builtin exception,
so callers can catch either `PriceError` or the usual `ValueError` / `TypeError`.
"""

__all__ = [
    "PriceError",
    "UnknownCurrencyError",
    "CurrencyMismatchError",
    "NegativeAmountError",
    "InvalidRangeError",
    "DivideByZeroError",
    "NegativeDivisorError",
    "InvalidRoundingModeError",
    "QuantizeError",
    "NilOperandError",
    "UnsupportedOperandTypeError",
]


class PriceError(Exception):
    """Base class for all monetary domain errors."""
    pass


class UnknownCurrencyError(PriceError, ValueError):
    """Raised when a currency code is not a known ISO 4217 code."""

    def __init__(self, code):
        super().__init__(f"Currency with code '{code}' is not a known ISO 4217 currency")
        self.code = code


class CurrencyMismatchError(PriceError, ValueError):
    """Raised when operands carry different currencies."""

    def __init__(self, left, right):
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")
        self.left = left
        self.right = right


class NegativeAmountError(PriceError, ValueError):
    """Raised when an amount would hold a value below zero."""
    pass


class InvalidRangeError(PriceError, ValueError):
    """Raised when a range has stop < start or its ends use different currencies."""
    pass


class DivideByZeroError(PriceError, ZeroDivisionError):
    """Raised when dividing by zero."""
    pass


class NegativeDivisorError(PriceError, ValueError):
    """Raised when dividing an amount by a negative scalar."""
    pass


class InvalidRoundingModeError(PriceError, ValueError):
    """Raised when a value cannot be interpreted as a `RoundingMode`."""
    pass


class QuantizeError(PriceError, ValueError):
    """Raised when a value cannot be quantized to the requested precision."""
    pass


class NilOperandError(PriceError, TypeError):
    """Raised when a required operand is None."""
    pass


class UnsupportedOperandTypeError(PriceError, TypeError):
    """Raised when an operand has a type the operation does not accept."""

    def __init__(self, operation: str, operand):
        super().__init__(f"Cannot call `{operation}` because operand of type {type(operand).__name__} is not supported: {operand!r}")
        self.operation = operation
        self.operand = operand
