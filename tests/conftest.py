"""Shared pytest fixtures and helpers.

Provides deterministic adapters so domain and handler tests do not depend on
wall-clock time or random ids:
- FixedClock: ClockProtocol returning a preset instant
- SequentialIdGenerator: IdGeneratorProtocol returning "id-1", "id-2", ...
- create_sales_order: Build a SalesOrder with test defaults
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from src.domain.entities.sales_order import SalesOrder
from src.domain.value_objects.currency import Currency
from src.domain.value_objects.product_id import ProductId

FIXED_NOW = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


class SequentialIdGenerator:
    """Id generator returning predictable ids with a prefix."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = 0

    def generate(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter}"


def create_sales_order(
    customer_id: str = "c1",
    currency_code: str = "USD",
    *,
    clock: FixedClock | None = None,
    id_generator: SequentialIdGenerator | None = None,
    items: list[tuple[str, int, str]] | None = None,
) -> SalesOrder:
    """Helper to create a PENDING SalesOrder, optionally pre-filled with items.

    Args:
        customer_id: Customer id.
        currency_code: Order currency code.
        clock: Clock (FixedClock() when omitted).
        id_generator: Id generator (SequentialIdGenerator("order") when omitted).
        items: (product_id, quantity, unit_price) tuples to add.
    """
    order = SalesOrder(
        customer_id,
        Currency(currency_code),
        clock=clock or FixedClock(),
        id_generator=id_generator or SequentialIdGenerator("order"),
    )
    for product_id, quantity, unit_price in items or []:
        order.add_item(ProductId(product_id), quantity, Decimal(unit_price))
    return order


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def usd() -> Currency:
    return Currency("USD")
