"""Invariant violation exceptions for value objects and entities.

Construction and arithmetic on value objects cannot return a Result (a
half-built Money is meaningless), so invariant violations are raised. Each
class subclasses ValueError, following Python's convention for a value of the
right type with an unacceptable content, and exposes a machine-readable
``code`` so callers can map it to a ``ValidationError`` without parsing the
message.

Usage:
    from src.domain.errors import InvalidAmountError

    try:
        Money(Decimal("-1"), usd)
    except InvalidAmountError as exc:
        exc.code  # ErrorCode.INVALID_AMOUNT
"""

from typing import ClassVar

from src.core.enums import ErrorCode


class InvariantViolationError(ValueError):
    """Base class for invariant violations raised during construction."""

    code: ClassVar[ErrorCode] = ErrorCode.VALIDATION_FAILED


class InvalidAmountError(InvariantViolationError):
    """Money amount is negative or not a finite number."""

    code = ErrorCode.INVALID_AMOUNT


class CurrencyMismatchError(InvariantViolationError):
    """Raised when attempting operations on different currencies."""

    code = ErrorCode.CURRENCY_MISMATCH

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}"
        )
        self.currency1 = currency1
        self.currency2 = currency2


class InvalidFactorError(InvariantViolationError):
    """Multiplication factor is negative or not a finite number."""

    code = ErrorCode.INVALID_FACTOR


class InvalidCurrencyCodeError(InvariantViolationError):
    """Currency code is not exactly three uppercase letters."""

    code = ErrorCode.INVALID_CURRENCY_CODE


class InvalidLocaleError(InvariantViolationError):
    """Locale tag is malformed or has no CLDR data."""

    code = ErrorCode.INVALID_LOCALE


class InvalidDateError(InvariantViolationError):
    """Date value cannot be parsed into a point in time."""

    code = ErrorCode.INVALID_DATE


class FutureDateError(InvariantViolationError):
    """Date value lies after the construction-time "now"."""

    code = ErrorCode.FUTURE_DATE


class InvalidQuantityError(InvariantViolationError):
    """Line item quantity is not a positive integer."""

    code = ErrorCode.INVALID_QUANTITY


class MissingCustomerIdError(InvariantViolationError):
    """Sales order created without a customer id."""

    code = ErrorCode.MISSING_CUSTOMER_ID


class EmptyCustomerNameError(InvariantViolationError):
    """Customer created with an empty or whitespace-only name."""

    code = ErrorCode.EMPTY_CUSTOMER_NAME
