"""Sales order commands (CQRS write operations).

Commands represent user intent to change sales order state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True, kw_only=True)
class CreateSalesOrder:
    """Open a new PENDING sales order.

    Attributes:
        customer_id: Ordering customer's id.
        currency_code: ISO 4217 code; the configured default when None.
            An empty string is rejected, not defaulted.
        ordered_at: When the order was placed; now when omitted.

    Example:
        >>> command = CreateSalesOrder(customer_id="c1", currency_code="USD")
        >>> result = handler.handle(command)
    """

    customer_id: str
    currency_code: str | None = None
    ordered_at: datetime | date | str | None = None


@dataclass(frozen=True, kw_only=True)
class AddSalesOrderItem:
    """Append an item to an existing order.

    Attributes:
        order_id: Target order.
        product_id: Product identifier.
        quantity: Number of units (> 0).
        unit_price: Price per unit in the order's currency (> 0).
    """

    order_id: str
    product_id: str
    quantity: int
    unit_price: Decimal | int | float | str


@dataclass(frozen=True, kw_only=True)
class ConfirmSalesOrder:
    """Move a PENDING order to CONFIRMED."""

    order_id: str


@dataclass(frozen=True, kw_only=True)
class ShipSalesOrder:
    """Move a CONFIRMED order to SHIPPED."""

    order_id: str


@dataclass(frozen=True, kw_only=True)
class CancelSalesOrder:
    """Move a PENDING or CONFIRMED order to CANCELLED."""

    order_id: str
