"""In-memory SalesOrderRepository adapter.

Keeps SalesOrder aggregates in a process-local dict. Orders are held by
reference, so mutations made inside ``locked()`` are visible to every later
lookup even before ``save`` is called again.

Thread Safety:
    - ``_registry_lock`` guards the order dict and the per-order lock table
    - ``locked(order_id)`` serializes callers working on the same order
    - Different orders never block each other
    - A per-order lock lives only while someone holds or waits for it, so
      lookups of unknown ids leave the lock table empty

Reference:
    - src/domain/protocols/sales_order_repository.py
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from src.domain.entities.sales_order import SalesOrder


class _OrderLock:
    """A lock plus the number of callers holding or waiting for it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class InMemorySalesOrderRepository:
    """Thread-safe, process-local sales order store.

    Implements SalesOrderRepository protocol.

    Example:
        >>> repo = InMemorySalesOrderRepository()
        >>> repo.save(order)
        >>> with repo.locked(order.id):
        ...     repo.find_by_id(order.id).confirm()
    """

    def __init__(self) -> None:
        self._orders: dict[str, SalesOrder] = {}
        self._order_locks: dict[str, _OrderLock] = {}
        self._registry_lock = threading.Lock()

    def find_by_id(self, order_id: str) -> SalesOrder | None:
        """Find a sales order by id.

        Args:
            order_id: Sales order identifier.

        Returns:
            SalesOrder if found, None otherwise.
        """
        with self._registry_lock:
            return self._orders.get(order_id)

    def save(self, order: SalesOrder) -> None:
        """Insert or replace a sales order under its id.

        Args:
            order: Sales order aggregate (its id must be set).
        """
        with self._registry_lock:
            self._orders[order.id] = order

    def count(self) -> int:
        """Number of stored orders."""
        with self._registry_lock:
            return len(self._orders)

    @contextmanager
    def locked(self, order_id: str) -> Iterator[None]:
        """Hold the exclusive lock for one order while the block runs.

        The lock is created on first use, so it can be taken before the
        order is saved for the first time, and dropped once the last holder
        or waiter leaves.

        Args:
            order_id: Sales order identifier.
        """
        with self._registry_lock:
            entry = self._order_locks.get(order_id)
            if entry is None:
                entry = self._order_locks[order_id] = _OrderLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._registry_lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._order_locks[order_id]
