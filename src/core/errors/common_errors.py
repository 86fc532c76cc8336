"""Generic DomainError subclasses shared by every layer.

- ValidationError: a value object or entity refused an input
  (handlers wrap raised invariant violations in it)
- NotFoundError: no resource under the requested id

Usage:
    Failure(error=ValidationError(
        code=ErrorCode.INVALID_CURRENCY_CODE,
        message="Currency code must be 3 uppercase letters: 'usd'",
        field="currency_code",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input.

    Attributes:
        field: Name of the command field holding the bad value, if known.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Unknown resource id.

    Attributes:
        resource_type: Kind of resource looked up, e.g. "SalesOrder".
        resource_id: The id that matched nothing.
    """

    resource_type: str
    resource_id: str

