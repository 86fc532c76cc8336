"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_sales_order_handler

The container is organized into modules:
- infrastructure: Core services (logging, clock, id generation, repository)
- sales_order_handlers: Sales order command/query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_clock,
    get_id_generator,
    get_logger,
    get_sales_order_repository,
)

# Sales order handlers
from src.core.container.sales_order_handlers import (
    get_add_sales_order_item_handler,
    get_cancel_sales_order_handler,
    get_confirm_sales_order_handler,
    get_create_sales_order_handler,
    get_get_sales_order_handler,
    get_ship_sales_order_handler,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_id_generator",
    "get_logger",
    "get_sales_order_repository",
    # Sales order handlers
    "get_add_sales_order_item_handler",
    "get_cancel_sales_order_handler",
    "get_confirm_sales_order_handler",
    "get_create_sales_order_handler",
    "get_get_sales_order_handler",
    "get_ship_sales_order_handler",
]
