"""Unit tests for SalesOrder aggregate.

Tests cover:
- Creation (customer id, currency, ordered_at, id generation)
- add_item validation order and Failure results
- State machine (confirm, ship, cancel) with Result types
- Total calculation
- End-to-end lifecycle scenarios

Architecture:
- Pure domain tests with FixedClock and SequentialIdGenerator
- Business operations are asserted through Success/Failure, never exceptions
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities.sales_order import SalesOrder
from src.domain.entities.sales_order_item import SalesOrderItem
from src.domain.enums import SalesOrderState
from src.domain.errors import FutureDateError, MissingCustomerIdError, SalesOrderError
from src.domain.value_objects.currency import Currency
from src.domain.value_objects.date_time import DateTime
from src.domain.value_objects.product_id import ProductId
from tests.conftest import (
    FIXED_NOW,
    FixedClock,
    SequentialIdGenerator,
    create_sales_order,
)


def advance_to(order: SalesOrder, state: SalesOrderState) -> SalesOrder:
    """Drive an order from PENDING to the requested state."""
    if state is SalesOrderState.CONFIRMED:
        order.confirm()
    elif state is SalesOrderState.SHIPPED:
        order.confirm()
        order.ship()
    elif state is SalesOrderState.CANCELLED:
        order.cancel()
    return order


# =============================================================================
# Creation Tests
# =============================================================================


@pytest.mark.unit
class TestSalesOrderCreation:
    """Test SalesOrder construction."""

    def test_new_order_is_pending_and_empty(self):
        """Test a new order starts PENDING with no items."""
        order = create_sales_order()

        assert order.state is SalesOrderState.PENDING
        assert order.items == ()
        assert order.item_count == 0

    def test_new_order_total_is_zero_in_order_currency(self):
        """Test total of an empty order is 0.00 in its currency."""
        assert str(create_sales_order(currency_code="EUR").calculate_total_amount()) == (
            "0.00 EUR"
        )

    def test_id_comes_from_generator(self):
        """Test the order id is taken from the id generator."""
        order = create_sales_order(id_generator=SequentialIdGenerator("order"))

        assert order.id == "order-1"

    def test_id_generated_without_generator(self):
        """Test a UUID id is generated when no generator is injected."""
        order = SalesOrder("c1", Currency("USD"))

        assert order.id is not None
        assert len(order.id) == 36

    def test_explicit_id_is_kept(self):
        """Test an explicit id overrides generation."""
        assert SalesOrder("c1", Currency("USD"), id="so-42").id == "so-42"

    def test_ordered_at_defaults_to_clock_now(self):
        """Test ordered_at defaults to the injected clock's time."""
        order = create_sales_order(clock=FixedClock())

        assert order.ordered_at.value == FIXED_NOW

    def test_ordered_at_accepts_iso_string(self):
        """Test an ISO string ordered_at is parsed."""
        order = SalesOrder(
            "c1", Currency("USD"), "2024-01-01T00:00:00Z", clock=FixedClock()
        )

        assert str(order.ordered_at) == "2024-01-01T00:00:00.000Z"

    def test_ordered_at_accepts_datetime_value_object(self):
        """Test a DateTime value object is used as-is."""
        ordered_at = DateTime(FIXED_NOW)

        assert SalesOrder("c1", Currency("USD"), ordered_at).ordered_at is ordered_at

    def test_future_ordered_at_raises(self):
        """Test ordered_at after the clock's now raises FutureDateError."""
        with pytest.raises(FutureDateError):
            SalesOrder(
                "c1",
                Currency("USD"),
                FIXED_NOW + timedelta(seconds=1),
                clock=FixedClock(),
            )

    @pytest.mark.parametrize("customer_id", ["", "  ", None])
    def test_blank_customer_id_raises(self, customer_id):
        """Test missing or blank customer id raises MissingCustomerIdError."""
        with pytest.raises(MissingCustomerIdError) as exc_info:
            SalesOrder(customer_id, Currency("USD"))  # type: ignore[arg-type]

        assert exc_info.value.code == ErrorCode.MISSING_CUSTOMER_ID

    @pytest.mark.parametrize(
        ("attribute", "value"),
        [
            ("currency", Currency("EUR")),
            ("id", "other-id"),
            ("customer_id", "other-customer"),
            ("ordered_at", DateTime(FIXED_NOW)),
        ],
    )
    def test_identity_fields_are_read_only(self, attribute, value):
        """Test id, customer_id, currency and ordered_at cannot be reassigned."""
        order = create_sales_order(items=[("p1", 1, "5.00")])

        with pytest.raises(AttributeError):
            setattr(order, attribute, value)

        assert order.currency.code == "USD"
        assert order.id == "order-1"
        assert order.calculate_total_amount().amount == Decimal("5.00")


# =============================================================================
# add_item Tests
# =============================================================================


@pytest.mark.unit
class TestSalesOrderAddItem:
    """Test add_item() validation and effects."""

    def test_add_item_success(self):
        """Test a valid item is appended and returned."""
        order = create_sales_order()

        result = order.add_item(ProductId("p1"), 2, Decimal("10.00"))

        assert isinstance(result, Success)
        item = result.value
        assert isinstance(item, SalesOrderItem)
        assert item.order_id == order.id
        assert item.unit_price.currency == order.currency
        assert order.items == (item,)

    def test_item_ids_come_from_generator(self):
        """Test item ids are drawn from the order's id generator."""
        order = create_sales_order(id_generator=SequentialIdGenerator("x"))

        first = order.add_item(ProductId("p1"), 1, "1.00")
        second = order.add_item(ProductId("p2"), 1, "1.00")

        assert first.value.item_id == "x-2"
        assert second.value.item_id == "x-3"

    def test_same_product_twice_creates_two_lines(self):
        """Test repeated products are not merged."""
        order = create_sales_order()

        order.add_item(ProductId("p1"), 1, "5.00")
        order.add_item(ProductId("p1"), 2, "5.00")

        assert order.item_count == 2
        assert order.calculate_total_amount().amount == Decimal("15.00")

    def test_items_preserve_insertion_order(self):
        """Test items are returned in the order they were added."""
        order = create_sales_order(items=[("a", 1, "1"), ("b", 1, "1"), ("c", 1, "1")])

        assert [str(item.product_id) for item in order.items] == ["a", "b", "c"]

    def test_items_view_is_not_mutable(self):
        """Test the exposed items cannot be used to change the order."""
        order = create_sales_order(items=[("p1", 1, "1")])

        with pytest.raises(AttributeError):
            order.items.append(order.items[0])  # type: ignore[attr-defined]

    def test_add_item_in_confirmed_state_allowed(self):
        """Test CONFIRMED orders still accept items."""
        order = advance_to(create_sales_order(), SalesOrderState.CONFIRMED)

        assert isinstance(order.add_item(ProductId("p1"), 1, "1.00"), Success)

    @pytest.mark.parametrize(
        "state", [SalesOrderState.SHIPPED, SalesOrderState.CANCELLED]
    )
    def test_add_item_in_terminal_state_fails(self, state):
        """Test terminal orders reject items with INVALID_ORDER_STATE."""
        order = advance_to(create_sales_order(), state)

        result = order.add_item(ProductId("p1"), 1, "1.00")

        assert isinstance(result, Failure)
        assert isinstance(result.error, SalesOrderError)
        assert result.error.code == ErrorCode.INVALID_ORDER_STATE
        assert result.error.state is state
        assert order.item_count == 0

    @pytest.mark.parametrize("product_id", [ProductId(""), ProductId("   "), None])
    def test_invalid_product_id_fails(self, product_id):
        """Test blank or missing product id yields INVALID_PRODUCT_ID."""
        order = create_sales_order()

        result = order.add_item(product_id, 1, "1.00")  # type: ignore[arg-type]

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PRODUCT_ID

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, True])
    def test_invalid_quantity_fails(self, quantity):
        """Test non-positive or non-integer quantity yields INVALID_QUANTITY."""
        order = create_sales_order()

        result = order.add_item(ProductId("p1"), quantity, "1.00")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_QUANTITY

    @pytest.mark.parametrize("price", [0, "-1", "NaN", "abc", None])
    def test_invalid_unit_price_fails(self, price):
        """Test non-positive or non-numeric price yields INVALID_UNIT_PRICE."""
        order = create_sales_order()

        result = order.add_item(ProductId("p1"), 1, price)  # type: ignore[arg-type]

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_UNIT_PRICE

    def test_state_checked_before_input(self):
        """Test a shipped order reports the state error even for bad input."""
        order = advance_to(create_sales_order(), SalesOrderState.SHIPPED)

        result = order.add_item(ProductId(""), 0, "-1")

        assert result.error.code == ErrorCode.INVALID_ORDER_STATE

    def test_failure_leaves_order_unchanged(self):
        """Test a rejected add does not modify items or total."""
        order = create_sales_order(items=[("p1", 2, "10.00")])

        order.add_item(ProductId("p2"), 0, "5.00")

        assert order.item_count == 1
        assert order.calculate_total_amount().amount == Decimal("20.00")


# =============================================================================
# State Machine Tests
# =============================================================================


@pytest.mark.unit
class TestSalesOrderTransitions:
    """Test confirm/ship/cancel transitions."""

    def test_confirm_from_pending(self):
        """Test PENDING → CONFIRMED."""
        order = create_sales_order()

        assert isinstance(order.confirm(), Success)
        assert order.state is SalesOrderState.CONFIRMED

    def test_ship_from_confirmed(self):
        """Test CONFIRMED → SHIPPED."""
        order = advance_to(create_sales_order(), SalesOrderState.CONFIRMED)

        assert isinstance(order.ship(), Success)
        assert order.state is SalesOrderState.SHIPPED
        assert order.is_terminal()

    @pytest.mark.parametrize(
        "state", [SalesOrderState.PENDING, SalesOrderState.CONFIRMED]
    )
    def test_cancel_from_modifiable_states(self, state):
        """Test PENDING/CONFIRMED → CANCELLED."""
        order = advance_to(create_sales_order(), state)

        assert isinstance(order.cancel(), Success)
        assert order.state is SalesOrderState.CANCELLED

    def test_ship_from_pending_fails(self):
        """Test shipping a PENDING order yields INVALID_STATE_TRANSITION."""
        order = create_sales_order()

        result = order.ship()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION
        assert result.error.message == "Cannot ship an order in PENDING state"
        assert order.state is SalesOrderState.PENDING

    @pytest.mark.parametrize(
        ("state", "transition"),
        [
            (SalesOrderState.CONFIRMED, "confirm"),
            (SalesOrderState.SHIPPED, "confirm"),
            (SalesOrderState.SHIPPED, "ship"),
            (SalesOrderState.SHIPPED, "cancel"),
            (SalesOrderState.CANCELLED, "confirm"),
            (SalesOrderState.CANCELLED, "ship"),
            (SalesOrderState.CANCELLED, "cancel"),
        ],
    )
    def test_disallowed_transitions_fail_without_change(self, state, transition):
        """Test disallowed transitions fail and keep the state."""
        order = advance_to(create_sales_order(), state)

        result = getattr(order, transition)()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION
        assert order.state is state


# =============================================================================
# Scenario Tests
# =============================================================================


@pytest.mark.unit
class TestSalesOrderScenarios:
    """End-to-end lifecycle scenarios."""

    def test_happy_path_lifecycle(self):
        """Test create → add → confirm → ship, then add is rejected."""
        order = SalesOrder("c1", Currency("USD"))
        assert order.state is SalesOrderState.PENDING
        assert str(order.calculate_total_amount()) == "0.00 USD"

        order.add_item(ProductId("p1"), 2, Decimal("10.00"))
        assert str(order.calculate_total_amount()) == "20.00 USD"
        assert order.item_count == 1

        assert isinstance(order.confirm(), Success)
        assert order.state is SalesOrderState.CONFIRMED

        assert isinstance(order.ship(), Success)
        assert order.state is SalesOrderState.SHIPPED

        result = order.add_item(ProductId("p2"), 1, Decimal("5.00"))
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ORDER_STATE

    def test_cancel_then_confirm_is_rejected(self):
        """Test PENDING → cancel → confirm fails."""
        order = SalesOrder("c1", Currency("USD"))

        assert isinstance(order.cancel(), Success)
        assert order.state is SalesOrderState.CANCELLED

        result = order.confirm()
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION

    def test_total_is_sum_of_lines(self):
        """Test total equals Σ unit_price × quantity."""
        order = create_sales_order(
            items=[("p1", 2, "10.00"), ("p2", 3, "0.99"), ("p3", 1, "100")]
        )

        expected = sum(
            (item.unit_price.amount * item.quantity for item in order.items),
            Decimal("0"),
        )
        assert order.calculate_total_amount().amount == expected == Decimal("122.97")
