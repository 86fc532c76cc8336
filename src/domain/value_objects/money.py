"""Immutable Money value object with Decimal precision.

Financial calculations require exact precision - floats introduce rounding
errors that accumulate. Money stores its amount as a Decimal and never
holds a negative value.

Error Handling:
    Invariant violations raise ValueError subclasses from
    src.domain.errors.invariant_errors:
    - InvalidAmountError: negative, NaN, infinite, or non-numeric amount
    - CurrencyMismatchError: arithmetic between different currency codes
    - InvalidFactorError: negative or non-numeric multiplication factor

Usage:
    from decimal import Decimal
    from src.domain.value_objects import Currency, Money

    usd = Currency("USD")
    price = Money(Decimal("9.99"), usd)
    total = price.multiply(3).add(Money(Decimal("1.00"), usd))
    str(total)  # '30.97 USD'
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from src.domain.errors.invariant_errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidFactorError,
    InvariantViolationError,
)
from src.domain.value_objects.currency import Currency

type Numeric = Decimal | int | float | str

CENT = Decimal("0.01")


def _to_decimal(
    value: Numeric, error_cls: type[InvariantViolationError], label: str
) -> Decimal:
    """Convert a numeric input to a finite Decimal.

    Ints and floats go through ``str`` so that 0.1 stays Decimal("0.1").

    Raises:
        error_cls: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise error_cls(f"{label} must be a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise error_cls(f"{label} must be a number: {value!r}") from e
    else:
        raise error_cls(f"{label} must be a number: {value!r}")

    if result.is_nan() or result.is_infinite():
        raise error_cls(f"{label} cannot be NaN or Infinite")
    return result


@dataclass(frozen=True)
class Money:
    """Immutable non-negative monetary value with currency.

    Attributes:
        amount: Non-negative Decimal value.
        currency: Currency of the amount.

    Immutability:
        Frozen dataclass ensures Money cannot be modified after creation.
        All arithmetic operations return new Money instances.

    Currency Safety:
        Operations between different currency codes raise
        CurrencyMismatchError. There is no implicit conversion.

    Example:
        >>> usd = Currency("USD")
        >>> Money(Decimal("10.00"), usd).add(Money(Decimal("2.50"), usd))
        Money(amount=Decimal('12.50'), currency=Currency(code='USD'))
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Validate money after initialization.

        Raises:
            InvalidAmountError: If amount is negative or not a finite number.
            TypeError: If currency is not a Currency.
        """
        amount = _to_decimal(self.amount, InvalidAmountError, "Amount")
        if amount < 0:
            raise InvalidAmountError(f"Amount cannot be negative: {amount}")
        if amount == 0:
            # Decimal("-0") compares equal to zero but prints a sign
            amount = amount.copy_abs()
        object.__setattr__(self, "amount", amount)

        if not isinstance(self.currency, Currency):
            raise TypeError(
                f"currency must be a Currency, got {type(self.currency).__name__}"
            )

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def add(self, other: "Money") -> "Money":
        """Add two Money values.

        Args:
            other: Money to add.

        Returns:
            New Money with sum of amounts.

        Raises:
            CurrencyMismatchError: If currency codes differ.
        """
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: Numeric) -> "Money":
        """Multiply the amount by a non-negative factor.

        A factor of zero is allowed and yields a zero amount.

        Args:
            factor: Number to multiply by.

        Returns:
            New Money with scaled amount.

        Raises:
            InvalidFactorError: If factor is negative or not a finite number.
        """
        value = _to_decimal(factor, InvalidFactorError, "Factor")
        if value < 0:
            raise InvalidFactorError(f"Factor cannot be negative: {value}")
        return Money(self.amount * value, self.currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Decimal | int | float) -> "Money":
        if isinstance(scalar, bool) or not isinstance(scalar, (Decimal, int, float)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: Decimal | int | float) -> "Money":
        return self.__mul__(scalar)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def is_positive(self) -> bool:
        """Check if amount is greater than zero."""
        return self.amount > 0

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, currency: Currency) -> Self:
        """Create Money with zero amount.

        Args:
            currency: Currency of the zero amount.

        Returns:
            Money with zero amount in specified currency.
        """
        return cls(Decimal("0"), currency)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def format(self, locale: str | None = None) -> str:
        """Format for display using the currency's locale conventions.

        Args:
            locale: Locale tag such as "en-US" or "fr_FR"; defaults to en_US.

        Returns:
            Locale-specific currency text, e.g. "$19.99".
        """
        return self.currency.format_amount(self._rounded(), locale)

    def __str__(self) -> str:
        """Return fixed-point text like "19.99 USD", half-up at the cent."""
        return f"{self._rounded()} {self.currency.code}"

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _rounded(self) -> Decimal:
        return self.amount.quantize(CENT, rounding=ROUND_HALF_UP)

    def _check_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)
