"""Queries - Read operations without side effects."""

from src.application.queries.sales_order_queries import GetSalesOrder

__all__ = ["GetSalesOrder"]
