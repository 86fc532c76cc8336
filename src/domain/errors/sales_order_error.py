"""Sales order domain errors.

Errors returned (not raised) by SalesOrder business operations.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Carry the order state at the time of rejection

Usage:
    from src.domain.errors import SalesOrderError

    result = order.ship()
    match result:
        case Failure(error=SalesOrderError(code=ErrorCode.INVALID_STATE_TRANSITION)):
            ...
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError
from src.domain.enums.sales_order_state import SalesOrderState


@dataclass(frozen=True, slots=True, kw_only=True)
class SalesOrderError(DomainError):
    """Rejected operation on a sales order.

    Attributes:
        code: One of INVALID_ORDER_STATE, INVALID_PRODUCT_ID,
            INVALID_QUANTITY, INVALID_UNIT_PRICE, INVALID_STATE_TRANSITION.
        message: Human-readable message.
        state: Order state when the operation was rejected.
        details: Additional context.
    """

    state: SalesOrderState

    @classmethod
    def invalid_order_state(cls, state: SalesOrderState) -> "SalesOrderError":
        """Items cannot be added in the given state."""
        return cls(
            code=ErrorCode.INVALID_ORDER_STATE,
            message=f"Cannot add items to a {state.name} order",
            state=state,
        )

    @classmethod
    def invalid_state_transition(
        cls, action: str, state: SalesOrderState
    ) -> "SalesOrderError":
        """The requested lifecycle action is not allowed from ``state``."""
        return cls(
            code=ErrorCode.INVALID_STATE_TRANSITION,
            message=f"Cannot {action} an order in {state.name} state",
            state=state,
        )
