"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They keep domain entities from leaking out of the application layer.

Usage:
    from src.application.dtos import SalesOrderSummary
"""

from src.application.dtos.sales_order_dtos import (
    AddSalesOrderItemResult,
    CreateSalesOrderResult,
    SalesOrderItemResult,
    SalesOrderSummary,
    SalesOrderTransitionResult,
)

__all__ = [
    "AddSalesOrderItemResult",
    "CreateSalesOrderResult",
    "SalesOrderItemResult",
    "SalesOrderSummary",
    "SalesOrderTransitionResult",
]
