"""Sales order handler dependency factories.

Handlers are cheap and stateless, so each call builds a new one wired to the
application-scoped infrastructure singletons.

Usage:
    from src.core.container import get_create_sales_order_handler

    handler = get_create_sales_order_handler()
    result = handler.handle(CreateSalesOrder(customer_id="c1"))
"""

from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import (
    get_clock,
    get_id_generator,
    get_logger,
    get_sales_order_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.add_sales_order_item_handler import (
        AddSalesOrderItemHandler,
    )
    from src.application.commands.handlers.create_sales_order_handler import (
        CreateSalesOrderHandler,
    )
    from src.application.commands.handlers.sales_order_transition_handlers import (
        CancelSalesOrderHandler,
        ConfirmSalesOrderHandler,
        ShipSalesOrderHandler,
    )
    from src.application.queries.handlers.get_sales_order_handler import (
        GetSalesOrderHandler,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_create_sales_order_handler() -> "CreateSalesOrderHandler":
    """Get CreateSalesOrder command handler.

    Returns:
        CreateSalesOrderHandler using the configured default currency.
    """
    from src.application.commands.handlers.create_sales_order_handler import (
        CreateSalesOrderHandler,
    )

    return CreateSalesOrderHandler(
        sales_order_repo=get_sales_order_repository(),
        clock=get_clock(),
        id_generator=get_id_generator(),
        logger=get_logger(),
        default_currency=settings.default_currency,
    )


def get_add_sales_order_item_handler() -> "AddSalesOrderItemHandler":
    """Get AddSalesOrderItem command handler."""
    from src.application.commands.handlers.add_sales_order_item_handler import (
        AddSalesOrderItemHandler,
    )

    return AddSalesOrderItemHandler(
        sales_order_repo=get_sales_order_repository(),
        logger=get_logger(),
    )


def get_confirm_sales_order_handler() -> "ConfirmSalesOrderHandler":
    """Get ConfirmSalesOrder command handler."""
    from src.application.commands.handlers.sales_order_transition_handlers import (
        ConfirmSalesOrderHandler,
    )

    return ConfirmSalesOrderHandler(
        sales_order_repo=get_sales_order_repository(),
        logger=get_logger(),
    )


def get_ship_sales_order_handler() -> "ShipSalesOrderHandler":
    """Get ShipSalesOrder command handler."""
    from src.application.commands.handlers.sales_order_transition_handlers import (
        ShipSalesOrderHandler,
    )

    return ShipSalesOrderHandler(
        sales_order_repo=get_sales_order_repository(),
        logger=get_logger(),
    )


def get_cancel_sales_order_handler() -> "CancelSalesOrderHandler":
    """Get CancelSalesOrder command handler."""
    from src.application.commands.handlers.sales_order_transition_handlers import (
        CancelSalesOrderHandler,
    )

    return CancelSalesOrderHandler(
        sales_order_repo=get_sales_order_repository(),
        logger=get_logger(),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_sales_order_handler() -> "GetSalesOrderHandler":
    """Get GetSalesOrder query handler.

    Returns:
        GetSalesOrderHandler using the configured default locale.
    """
    from src.application.queries.handlers.get_sales_order_handler import (
        GetSalesOrderHandler,
    )

    return GetSalesOrderHandler(
        sales_order_repo=get_sales_order_repository(),
        default_locale=settings.default_locale,
    )
