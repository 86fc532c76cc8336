"""Sales order DTOs (Data Transfer Objects).

Response dataclasses returned by sales order handlers. Domain entities never
leave the application layer; handlers map them to these DTOs.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.value_objects.money import Money


@dataclass
class SalesOrderItemResult:
    """Single order line.

    Attributes:
        item_id: Line id.
        product_id: Product identifier.
        quantity: Number of units.
        unit_price: Price per unit as Decimal.
        total: unit_price × quantity as Decimal.
    """

    item_id: str
    product_id: str
    quantity: int
    unit_price: Decimal
    total: Decimal


@dataclass
class CreateSalesOrderResult:
    """Result of CreateSalesOrder."""

    order_id: str
    state: str
    currency_code: str
    ordered_at: str


@dataclass
class AddSalesOrderItemResult:
    """Result of AddSalesOrderItem.

    Attributes:
        order_id: Order the item was added to.
        item: The new line.
        item_count: Lines in the order after the add.
        total_amount: Order total after the add.
    """

    order_id: str
    item: SalesOrderItemResult
    item_count: int
    total_amount: Decimal


@dataclass
class SalesOrderTransitionResult:
    """Result of a lifecycle command (confirm, ship, cancel)."""

    order_id: str
    previous_state: str
    state: str


@dataclass
class SalesOrderSummary:
    """Read model for GetSalesOrder.

    Attributes:
        id: Order id.
        customer_id: Ordering customer.
        state: Lifecycle state value (e.g. "PENDING").
        currency_code: Order currency.
        ordered_at: ISO-8601 UTC timestamp.
        items: Lines in insertion order.
        total: Order total.
        total_display: Total formatted for the requested locale.
        ordered_at_display: Order date formatted for the requested locale.
    """

    id: str
    customer_id: str
    state: str
    currency_code: str
    ordered_at: str
    items: list[SalesOrderItemResult]
    total: Money
    total_display: str
    ordered_at_display: str
