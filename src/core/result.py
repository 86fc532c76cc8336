"""Success/Failure values for operations that business rules may reject.

``SalesOrder.add_item`` and the lifecycle transitions, plus every application
handler, return one of these instead of raising. A rejected call hands back
the reason as data and leaves the aggregate exactly as it was.

Usage:
    outcome = order.ship()
    match outcome:
        case Success():
            ...
        case Failure(error=error):
            logger.warning("sales_order_transition_rejected", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Accepted operation.

    Attributes:
        value: Payload produced by the operation (None for transitions).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Rejected operation.

    Attributes:
        error: Why it was rejected (a DomainError or ApplicationError).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
