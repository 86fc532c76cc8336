"""ApplicationError and helpers that translate domain rejections into it."""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    from_invariant_violation,
    from_sales_order_error,
    sales_order_not_found,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "from_invariant_violation",
    "from_sales_order_error",
    "sales_order_not_found",
]
