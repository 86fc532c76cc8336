"""SalesOrderRepository protocol.

Port for keeping SalesOrder aggregates addressable by id within the process.
Infrastructure provides the adapter.

The aggregate mutates its state and item list in place, so concurrent callers
working on the same order must be serialized. ``locked(order_id)`` hands out
one exclusive lock per order id; command handlers hold it for the whole
load-mutate-save sequence.

Reference:
    - src/infrastructure/persistence/in_memory_sales_order_repository.py
"""

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities.sales_order import SalesOrder


class SalesOrderRepository(Protocol):
    """Sales order repository protocol (port).

    Example:
        >>> with repo.locked(order_id):
        ...     order = repo.find_by_id(order_id)
        ...     order.confirm()
        ...     repo.save(order)
    """

    def find_by_id(self, order_id: str) -> SalesOrder | None:
        """Find a sales order by id.

        Args:
            order_id: Sales order identifier.

        Returns:
            SalesOrder if found, None otherwise.
        """
        ...

    def save(self, order: SalesOrder) -> None:
        """Store (insert or replace) a sales order.

        Args:
            order: Sales order aggregate.
        """
        ...

    def locked(self, order_id: str) -> AbstractContextManager[None]:
        """Return a context manager holding the exclusive lock for an order.

        Args:
            order_id: Sales order identifier.

        Returns:
            Context manager; the lock is held inside the ``with`` block.
        """
        ...
