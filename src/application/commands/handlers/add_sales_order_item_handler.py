"""AddSalesOrderItem command handler.

Flow:
1. Lock the order
2. Load it (fail if unknown)
3. Ask the aggregate to add the item (it validates state and input)
4. Save and return the new line with the updated total

The aggregate validates before it mutates, so a rejected add leaves the
stored order untouched.
"""

from src.application.commands.sales_order_commands import AddSalesOrderItem
from src.application.dtos.sales_order_dtos import (
    AddSalesOrderItemResult,
    SalesOrderItemResult,
)
from src.application.errors import (
    ApplicationError,
    from_sales_order_error,
    sales_order_not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.sales_order_item import SalesOrderItem
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.sales_order_repository import SalesOrderRepository
from src.domain.value_objects.product_id import ProductId


def to_item_result(item: SalesOrderItem) -> SalesOrderItemResult:
    """Map a SalesOrderItem to its DTO."""
    return SalesOrderItemResult(
        item_id=item.item_id,
        product_id=str(item.product_id),
        quantity=item.quantity,
        unit_price=item.unit_price.amount,
        total=item.calculate_item_total().amount,
    )


class AddSalesOrderItemHandler:
    """Handler for adding an item to a sales order.

    Dependencies (injected via constructor):
        - SalesOrderRepository: Load, lock and save orders
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        sales_order_repo: SalesOrderRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._sales_order_repo = sales_order_repo
        self._logger = logger

    def handle(
        self, cmd: AddSalesOrderItem
    ) -> Result[AddSalesOrderItemResult, ApplicationError]:
        """Handle AddSalesOrderItem command.

        Args:
            cmd: AddSalesOrderItem command.

        Returns:
            Success(AddSalesOrderItemResult): Item appended.
            Failure(ApplicationError): NOT_FOUND for an unknown order,
                CONFLICT when the order no longer accepts items,
                COMMAND_VALIDATION_FAILED for bad product/quantity/price.
        """
        with self._sales_order_repo.locked(cmd.order_id):
            # Step 1: Load order
            order = self._sales_order_repo.find_by_id(cmd.order_id)
            if order is None:
                return Failure(error=sales_order_not_found(cmd.order_id))

            # Step 2: Add item (aggregate validates)
            # ProductId(None) would mint a fresh id, so a missing one goes in as None
            product_id = (
                ProductId(cmd.product_id) if isinstance(cmd.product_id, str) else None
            )
            result = order.add_item(product_id, cmd.quantity, cmd.unit_price)
            if isinstance(result, Failure):
                self._logger.warning(
                    "sales_order_item_rejected",
                    order_id=order.id,
                    state=order.state.value,
                    error_code=result.error.code.value,
                )
                return Failure(error=from_sales_order_error(result.error))

            # Step 3: Persist
            self._sales_order_repo.save(order)
            item = result.value
            total = order.calculate_total_amount()

        self._logger.info(
            "sales_order_item_added",
            order_id=order.id,
            item_id=item.item_id,
            product_id=str(item.product_id),
            quantity=item.quantity,
        )

        return Success(
            value=AddSalesOrderItemResult(
                order_id=order.id,
                item=to_item_result(item),
                item_count=order.item_count,
                total_amount=total.amount,
            )
        )
