"""SalesOrder aggregate root.

Represents a customer's order in the sales bounded context. The order owns
its line items, enforces the lifecycle state machine, and computes totals in
its single currency.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction errors raise (invalid object cannot exist)
    - Business operations return Result types (railway-oriented programming)
    - Validation happens before mutation, so a Failure leaves the order unchanged

State Machine:
    PENDING → CONFIRMED → SHIPPED
    PENDING/CONFIRMED → CANCELLED

Usage:
    from decimal import Decimal
    from src.domain.entities import SalesOrder
    from src.domain.value_objects import Currency, ProductId

    order = SalesOrder("c1", Currency("USD"))
    order.add_item(ProductId("p1"), 2, Decimal("10.00"))
    str(order.calculate_total_amount())  # '20.00 USD'

    match order.confirm():
        case Success():
            assert order.state is SalesOrderState.CONFIRMED
        case Failure(error=error):
            print(error.message)
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.core.enums import ErrorCode
from src.domain.entities.sales_order_item import SalesOrderItem
from src.domain.enums.sales_order_state import SalesOrderAction, SalesOrderState
from src.domain.errors.invariant_errors import MissingCustomerIdError
from src.domain.errors.sales_order_error import SalesOrderError
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.value_objects.currency import Currency
from src.domain.value_objects.date_time import DateTime
from src.domain.value_objects.money import Money
from src.domain.value_objects.product_id import ProductId


class SalesOrder:
    """Sales order aggregate root.

    Items can only be added through ``add_item`` and are exposed as a tuple,
    so the item sequence is append-only from the outside. Identity fields
    (id, customer_id, currency, ordered_at) are read-only properties; only
    the lifecycle state and the item list change after construction.

    Args:
        customer_id: Id of the ordering customer (non-blank).
        currency: Currency of every amount in the order, fixed at creation.
        ordered_at: When the order was placed (defaults to now, never future).
        id: Unique order id, generated when omitted.
        clock: Optional clock used for the ordered_at default.
        id_generator: Optional id source for the order and item ids.

    Raises:
        MissingCustomerIdError: If customer_id is missing or blank.
        InvalidDateError, FutureDateError: If ordered_at is invalid.
    """

    def __init__(
        self,
        customer_id: str,
        currency: Currency,
        ordered_at: DateTime | datetime | date | str | None = None,
        *,
        id: str | None = None,
        clock: ClockProtocol | None = None,
        id_generator: IdGeneratorProtocol | None = None,
    ) -> None:
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise MissingCustomerIdError("Customer ID is required")

        if not isinstance(ordered_at, DateTime):
            reference = clock.now() if clock is not None else None
            ordered_at = DateTime(ordered_at, reference=reference)

        self._id_generator = id_generator
        self._customer_id = customer_id
        self._currency = currency
        self._ordered_at = ordered_at
        self._id = id if id is not None else self._next_id()
        self._state = SalesOrderState.PENDING
        self._items: list[SalesOrderItem] = []

    def __repr__(self) -> str:
        return (
            f"SalesOrder(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"currency={self._currency!r}, state={self._state.value!r}, "
            f"items={len(self._items)})"
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def currency(self) -> Currency:
        """Currency of the order, fixed at creation."""
        return self._currency

    @property
    def ordered_at(self) -> DateTime:
        return self._ordered_at

    @property
    def state(self) -> SalesOrderState:
        """Current lifecycle state."""
        return self._state

    @property
    def items(self) -> tuple[SalesOrderItem, ...]:
        """Line items in insertion order (read-only copy)."""
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def can_add_items(self) -> bool:
        """Check if the current state accepts new items.

        Returns:
            bool: True while PENDING or CONFIRMED.
        """
        return self._state in SalesOrderState.modifiable_states()

    def is_terminal(self) -> bool:
        """Check if the order is SHIPPED or CANCELLED."""
        return self._state in SalesOrderState.terminal_states()

    def calculate_total_amount(self) -> Money:
        """Sum of all item totals in the order's currency.

        Every unit price is built with the order's currency, so the sum can
        never hit a currency mismatch.

        Returns:
            Money: Total amount, zero when the order has no items.
        """
        total = Money.zero(self.currency)
        for item in self._items:
            total = total.add(item.calculate_item_total())
        return total

    # -------------------------------------------------------------------------
    # Item Management (Return Result)
    # -------------------------------------------------------------------------

    def add_item(
        self,
        product_id: ProductId | None,
        quantity: int,
        unit_price_amount: Decimal | int | float | str,
    ) -> Result[SalesOrderItem, SalesOrderError]:
        """Append a new line item priced in the order's currency.

        Repeated calls for the same product create separate lines.

        Args:
            product_id: Product being ordered.
            quantity: Number of units (> 0).
            unit_price_amount: Price per unit (> 0), in the order's currency.

        Returns:
            Success(item): The appended SalesOrderItem.
            Failure(error): INVALID_ORDER_STATE, INVALID_PRODUCT_ID,
                INVALID_QUANTITY, or INVALID_UNIT_PRICE.
        """
        if not self.can_add_items():
            return Failure(error=SalesOrderError.invalid_order_state(self._state))

        if (
            not isinstance(product_id, ProductId)
            or not isinstance(product_id.id, str)
            or not product_id.id.strip()
        ):
            return Failure(
                error=self._item_error(
                    ErrorCode.INVALID_PRODUCT_ID, "Product ID is required"
                )
            )

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            return Failure(
                error=self._item_error(
                    ErrorCode.INVALID_QUANTITY, "Quantity must be greater than zero"
                )
            )

        unit_price_value = self._positive_decimal(unit_price_amount)
        if unit_price_value is None:
            return Failure(
                error=self._item_error(
                    ErrorCode.INVALID_UNIT_PRICE,
                    "Unit price must be greater than zero",
                )
            )

        unit_price = Money(unit_price_value, self.currency)
        item = SalesOrderItem(
            order_id=self.id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            item_id=self._next_id(),
        )
        self._items.append(item)
        return Success(value=item)

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def confirm(self) -> Result[None, SalesOrderError]:
        """Transition PENDING → CONFIRMED.

        Returns:
            Success(None): Order confirmed.
            Failure(error): INVALID_STATE_TRANSITION from any other state.
        """
        return self._apply(SalesOrderAction.CONFIRM)

    def ship(self) -> Result[None, SalesOrderError]:
        """Transition CONFIRMED → SHIPPED.

        Returns:
            Success(None): Order shipped.
            Failure(error): INVALID_STATE_TRANSITION from any other state.
        """
        return self._apply(SalesOrderAction.SHIP)

    def cancel(self) -> Result[None, SalesOrderError]:
        """Transition PENDING or CONFIRMED → CANCELLED.

        Returns:
            Success(None): Order cancelled.
            Failure(error): INVALID_STATE_TRANSITION from SHIPPED or CANCELLED.
        """
        return self._apply(SalesOrderAction.CANCEL)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _apply(self, action: SalesOrderAction) -> Result[None, SalesOrderError]:
        target = self._state.next_state(action)
        if target is None:
            return Failure(
                error=SalesOrderError.invalid_state_transition(
                    action.value, self._state
                )
            )
        self._state = target
        return Success(value=None)

    def _item_error(self, code: ErrorCode, message: str) -> SalesOrderError:
        return SalesOrderError(code=code, message=message, state=self._state)

    def _next_id(self) -> str:
        if self._id_generator is not None:
            return self._id_generator.generate()
        return str(uuid7())

    @staticmethod
    def _positive_decimal(value: Decimal | int | float | str) -> Decimal | None:
        """Convert to Decimal, or None if not a finite number > 0."""
        if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
            return None
        try:
            result = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation:
            return None
        if not result.is_finite() or result <= 0:
            return None
        return result
