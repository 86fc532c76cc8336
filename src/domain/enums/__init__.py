"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - SalesOrderState: Sales order lifecycle states
    - SalesOrderAction: Actions that move an order between states
"""

from src.domain.enums.sales_order_state import (
    TRANSITIONS,
    SalesOrderAction,
    SalesOrderState,
)

__all__ = [
    "SalesOrderAction",
    "SalesOrderState",
    "TRANSITIONS",
]
