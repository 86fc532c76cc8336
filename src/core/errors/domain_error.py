"""DomainError: base for rejection reasons carried inside ``Failure``.

Raised invariant violations live in ``src.domain.errors.invariant_errors``;
this class is for the other channel, where an operation is refused and the
reason travels as a value.

Subclasses stay frozen, slotted and keyword-only so new fields can follow the
defaulted ``details`` field:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class SalesOrderError(DomainError):
        state: SalesOrderState
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Rejection reason (a value, never raised).

    Attributes:
        code: ErrorCode identifying the rule that failed.
        message: Text suitable for an operator or API response.
        details: Extra string context, e.g. {"state": "SHIPPED"}.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
