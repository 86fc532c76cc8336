"""Sales order lifecycle command handlers.

Handlers for ConfirmSalesOrder, ShipSalesOrder and CancelSalesOrder. They
share one flow and differ only in which aggregate transition they invoke:

1. Lock the order
2. Load it (fail if unknown)
3. Apply the transition (the aggregate enforces the state machine)
4. Save and return previous and new state
"""

from abc import ABC, abstractmethod

from src.application.commands.sales_order_commands import (
    CancelSalesOrder,
    ConfirmSalesOrder,
    ShipSalesOrder,
)
from src.application.dtos.sales_order_dtos import SalesOrderTransitionResult
from src.application.errors import (
    ApplicationError,
    from_sales_order_error,
    sales_order_not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.sales_order import SalesOrder
from src.domain.enums.sales_order_state import SalesOrderAction
from src.domain.errors import SalesOrderError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.sales_order_repository import SalesOrderRepository

type TransitionCommand = ConfirmSalesOrder | ShipSalesOrder | CancelSalesOrder


class SalesOrderTransitionHandler(ABC):
    """Base handler for lifecycle transitions.

    Subclasses set ``action`` and implement ``apply``.
    """

    action: SalesOrderAction

    def __init__(
        self,
        sales_order_repo: SalesOrderRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            sales_order_repo: Sales order repository.
            logger: Structured logger.
        """
        self._sales_order_repo = sales_order_repo
        self._logger = logger

    @abstractmethod
    def apply(self, order: SalesOrder) -> Result[None, SalesOrderError]:
        """Run this handler's transition on the loaded order."""

    def handle(
        self, cmd: TransitionCommand
    ) -> Result[SalesOrderTransitionResult, ApplicationError]:
        """Handle a lifecycle command.

        Args:
            cmd: Command carrying the order id.

        Returns:
            Success(SalesOrderTransitionResult): Transition applied.
            Failure(ApplicationError): NOT_FOUND for an unknown order,
                CONFLICT when the transition is not allowed.
        """
        with self._sales_order_repo.locked(cmd.order_id):
            order = self._sales_order_repo.find_by_id(cmd.order_id)
            if order is None:
                return Failure(error=sales_order_not_found(cmd.order_id))

            previous_state = order.state
            result = self.apply(order)
            if isinstance(result, Failure):
                self._logger.warning(
                    "sales_order_transition_rejected",
                    order_id=order.id,
                    action=self.action.value,
                    state=previous_state.value,
                )
                return Failure(error=from_sales_order_error(result.error))

            self._sales_order_repo.save(order)

        self._logger.info(
            "sales_order_transitioned",
            order_id=order.id,
            action=self.action.value,
            from_state=previous_state.value,
            to_state=order.state.value,
        )

        return Success(
            value=SalesOrderTransitionResult(
                order_id=order.id,
                previous_state=previous_state.value,
                state=order.state.value,
            )
        )


class ConfirmSalesOrderHandler(SalesOrderTransitionHandler):
    """PENDING → CONFIRMED."""

    action = SalesOrderAction.CONFIRM

    def apply(self, order: SalesOrder) -> Result[None, SalesOrderError]:
        return order.confirm()


class ShipSalesOrderHandler(SalesOrderTransitionHandler):
    """CONFIRMED → SHIPPED."""

    action = SalesOrderAction.SHIP

    def apply(self, order: SalesOrder) -> Result[None, SalesOrderError]:
        return order.ship()


class CancelSalesOrderHandler(SalesOrderTransitionHandler):
    """PENDING or CONFIRMED → CANCELLED."""

    action = SalesOrderAction.CANCEL

    def apply(self, order: SalesOrder) -> Result[None, SalesOrderError]:
        return order.cancel()
