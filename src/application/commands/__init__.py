"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateSalesOrder, ShipSalesOrder).

Each command has a corresponding handler that contains the orchestration
needed to execute the command.
"""

from src.application.commands.sales_order_commands import (
    AddSalesOrderItem,
    CancelSalesOrder,
    ConfirmSalesOrder,
    CreateSalesOrder,
    ShipSalesOrder,
)

__all__ = [
    "AddSalesOrderItem",
    "CancelSalesOrder",
    "ConfirmSalesOrder",
    "CreateSalesOrder",
    "ShipSalesOrder",
]
