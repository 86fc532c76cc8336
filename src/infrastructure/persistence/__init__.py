"""Persistence adapters implementing repository protocols."""

from src.infrastructure.persistence.in_memory_sales_order_repository import (
    InMemorySalesOrderRepository,
)

__all__ = ["InMemorySalesOrderRepository"]
