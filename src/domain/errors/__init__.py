"""Domain errors package.

Exports the invariant violation exceptions raised by value objects and
entities, and the SalesOrderError value returned by aggregate operations.

Usage:
    from src.domain.errors import CurrencyMismatchError, SalesOrderError
"""

from src.domain.errors.invariant_errors import (
    CurrencyMismatchError,
    EmptyCustomerNameError,
    FutureDateError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    InvalidDateError,
    InvalidFactorError,
    InvalidLocaleError,
    InvalidQuantityError,
    InvariantViolationError,
    MissingCustomerIdError,
)
from src.domain.errors.sales_order_error import SalesOrderError

__all__ = [
    "CurrencyMismatchError",
    "EmptyCustomerNameError",
    "FutureDateError",
    "InvalidAmountError",
    "InvalidCurrencyCodeError",
    "InvalidDateError",
    "InvalidFactorError",
    "InvalidLocaleError",
    "InvalidQuantityError",
    "InvariantViolationError",
    "MissingCustomerIdError",
    "SalesOrderError",
]
