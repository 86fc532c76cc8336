"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.errors.invariant_errors import CurrencyMismatchError
from src.domain.value_objects.currency import DEFAULT_LOCALE, Currency, parse_locale
from src.domain.value_objects.date_time import DateTime
from src.domain.value_objects.money import Money
from src.domain.value_objects.product_id import ProductId

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "DEFAULT_LOCALE",
    "DateTime",
    "Money",
    "ProductId",
    "parse_locale",
]
