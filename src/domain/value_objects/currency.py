"""Currency value object.

A currency is identified by its three-letter ISO 4217 style code and knows
how to render an amount for a locale. Rendering is delegated to Babel's CLDR
data; this module only fixes the policy (always two fraction digits).

Usage:
    from src.domain.value_objects import Currency

    usd = Currency("USD")
    usd.format_amount(Decimal("1234.5"))           # '$1,234.50'
    usd.format_amount(Decimal("1234.5"), "de-DE")  # '1.234,50 $'
"""

import re
from dataclasses import dataclass
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from src.domain.errors.invariant_errors import (
    InvalidCurrencyCodeError,
    InvalidLocaleError,
)

DEFAULT_LOCALE = "en_US"
"""Locale used when a formatting call does not name one."""

_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def parse_locale(locale: str | None) -> Locale:
    """Resolve a locale tag (``en-US`` or ``en_US``) to a Babel Locale.

    Args:
        locale: Locale identifier, or None for DEFAULT_LOCALE.

    Returns:
        Babel Locale instance.

    Raises:
        InvalidLocaleError: If the tag is malformed or has no locale data.
    """
    tag = locale or DEFAULT_LOCALE
    if not isinstance(tag, str):
        raise InvalidLocaleError(f"Locale must be a string: {tag!r}")
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidLocaleError(f"Unknown locale: {tag!r}") from e


@dataclass(frozen=True)
class Currency:
    """Immutable currency identified by a three-letter uppercase code.

    Attributes:
        code: Currency code, e.g. "USD". No normalisation is applied:
            "usd" is rejected rather than upper-cased.

    Raises:
        InvalidCurrencyCodeError: If code is not exactly 3 uppercase letters.
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not _CODE_PATTERN.fullmatch(self.code):
            raise InvalidCurrencyCodeError(
                f"Currency code must be 3 uppercase letters: {self.code!r}"
            )

    def format_amount(
        self, amount: Decimal | int | float, locale: str | None = None
    ) -> str:
        """Format an amount in this currency for a locale.

        Args:
            amount: Amount to render.
            locale: Locale tag; defaults to DEFAULT_LOCALE.

        Returns:
            Locale-specific currency text with exactly two fraction digits.
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        return format_currency(
            amount,
            self.code,
            locale=parse_locale(locale),
            currency_digits=False,
        )

    def __str__(self) -> str:
        return self.code
