"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    from_invariant_violation: Map a raised invariant violation
    from_sales_order_error: Map a rejected aggregate operation
    sales_order_not_found: Error for an unknown order id
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.errors.domain_error import DomainError
from src.domain.errors import InvariantViolationError, SalesOrderError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query handlers),
    typically wrapping domain errors with additional context.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Sales order not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by command and
    query handlers to provide structured error information to callers.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Cannot ship an order in PENDING state",
        ...     domain_error=sales_order_error,
        ...     details={"state": "PENDING"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


# Lifecycle rejections conflict with the order's current state; the rest are
# bad input.
_STATE_ERROR_CODES = frozenset(
    {ErrorCode.INVALID_ORDER_STATE, ErrorCode.INVALID_STATE_TRANSITION}
)


def from_sales_order_error(error: SalesOrderError) -> ApplicationError:
    """Wrap a SalesOrderError returned by the aggregate.

    Args:
        error: Error from add_item/confirm/ship/cancel.

    Returns:
        ApplicationError with CONFLICT for state errors, otherwise
        COMMAND_VALIDATION_FAILED.
    """
    code = (
        ApplicationErrorCode.CONFLICT
        if error.code in _STATE_ERROR_CODES
        else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
    )
    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details={"state": error.state.value},
    )


def from_invariant_violation(
    exc: InvariantViolationError, field: str | None = None
) -> ApplicationError:
    """Wrap an invariant violation raised by a value object or entity.

    Args:
        exc: Raised invariant violation.
        field: Command field that carried the rejected value.

    Returns:
        ApplicationError with COMMAND_VALIDATION_FAILED.
    """
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=str(exc),
        domain_error=ValidationError(code=exc.code, message=str(exc), field=field),
    )


def sales_order_not_found(order_id: str) -> ApplicationError:
    message = f"Sales order not found: {order_id}"
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=message,
        domain_error=NotFoundError(
            code=ErrorCode.SALES_ORDER_NOT_FOUND,
            message=message,
            resource_type="SalesOrder",
            resource_id=order_id,
        ),
    )
