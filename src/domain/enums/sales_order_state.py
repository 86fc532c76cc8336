"""Sales order lifecycle states.

Defines the status state machine for sales orders.

State Machine:
    PENDING → CONFIRMED → SHIPPED
    PENDING/CONFIRMED → CANCELLED

    - PENDING: Created, items may be added (initial)
    - CONFIRMED: Accepted for processing, items may still be added
    - SHIPPED: Handed to the carrier (terminal)
    - CANCELLED: Will not be processed (terminal)

Usage:
    from src.domain.enums import SalesOrderAction, SalesOrderState

    next_state = order.state.next_state(SalesOrderAction.CONFIRM)
    if next_state is None:
        # Transition not allowed
"""

from enum import Enum


class SalesOrderAction(str, Enum):
    """Lifecycle actions that drive a sales order between states."""

    CONFIRM = "confirm"
    SHIP = "ship"
    CANCEL = "cancel"


class SalesOrderState(str, Enum):
    """Sales order lifecycle states.

    String Enum:
        Inherits from str for easy serialization.
        Values are uppercase to match the business vocabulary.

    State Transitions:
        PENDING → CONFIRMED: confirm
        CONFIRMED → SHIPPED: ship
        PENDING → CANCELLED: cancel
        CONFIRMED → CANCELLED: cancel
        SHIPPED, CANCELLED: no outgoing transitions
    """

    PENDING = "PENDING"
    """Order created, awaiting confirmation. Initial state."""

    CONFIRMED = "CONFIRMED"
    """Order confirmed and ready for processing."""

    SHIPPED = "SHIPPED"
    """Order shipped to the customer. Terminal."""

    CANCELLED = "CANCELLED"
    """Order cancelled, will not be processed. Terminal."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all state values as strings.

        Returns:
            list[str]: List of state values.
        """
        return [state.value for state in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid state.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid state.
        """
        return value in cls.values()

    @classmethod
    def modifiable_states(cls) -> list["SalesOrderState"]:
        """Get states in which items may still be added.

        Returns:
            list[SalesOrderState]: PENDING and CONFIRMED.
        """
        return [cls.PENDING, cls.CONFIRMED]

    @classmethod
    def terminal_states(cls) -> list["SalesOrderState"]:
        """Get terminal states (no outgoing transitions).

        Returns:
            list[SalesOrderState]: SHIPPED and CANCELLED.
        """
        return [cls.SHIPPED, cls.CANCELLED]

    def next_state(self, action: SalesOrderAction) -> "SalesOrderState | None":
        """Look up the target state for ``action`` from this state.

        Args:
            action: Lifecycle action to apply.

        Returns:
            The target state, or None if the transition is not allowed.
        """
        return TRANSITIONS[action].get(self)


TRANSITIONS: dict[SalesOrderAction, dict[SalesOrderState, SalesOrderState]] = {
    SalesOrderAction.CONFIRM: {
        SalesOrderState.PENDING: SalesOrderState.CONFIRMED,
    },
    SalesOrderAction.SHIP: {
        SalesOrderState.CONFIRMED: SalesOrderState.SHIPPED,
    },
    SalesOrderAction.CANCEL: {
        SalesOrderState.PENDING: SalesOrderState.CANCELLED,
        SalesOrderState.CONFIRMED: SalesOrderState.CANCELLED,
    },
}
"""Exhaustive transition table: action → {from_state: to_state}."""
