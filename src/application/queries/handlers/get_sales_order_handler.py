"""GetSalesOrder query handler.

Handles requests to retrieve a single sales order.
Returns DTO (not domain entity) to prevent leaking domain to callers.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, ApplicationError] (explicit error handling)
- Side-effect free
"""

from src.application.commands.handlers.add_sales_order_item_handler import (
    to_item_result,
)
from src.application.dtos.sales_order_dtos import SalesOrderSummary
from src.application.errors import (
    ApplicationError,
    from_invariant_violation,
    sales_order_not_found,
)
from src.application.queries.sales_order_queries import GetSalesOrder
from src.core.result import Failure, Result, Success
from src.domain.errors import InvalidLocaleError
from src.domain.protocols.sales_order_repository import SalesOrderRepository
from src.domain.value_objects.currency import parse_locale


class GetSalesOrderHandler:
    """Handler for GetSalesOrder query.

    Dependencies (injected via constructor):
        - SalesOrderRepository: For order retrieval
    """

    def __init__(
        self,
        sales_order_repo: SalesOrderRepository,
        default_locale: str = "en_US",
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            sales_order_repo: Sales order repository.
            default_locale: Locale for display strings when the query has none.
        """
        self._sales_order_repo = sales_order_repo
        self._default_locale = default_locale

    def handle(
        self, query: GetSalesOrder
    ) -> Result[SalesOrderSummary, ApplicationError]:
        """Handle GetSalesOrder query.

        Args:
            query: GetSalesOrder query with order id and optional locale.

        Returns:
            Success(SalesOrderSummary): Order found.
            Failure(ApplicationError): NOT_FOUND for an unknown order,
                COMMAND_VALIDATION_FAILED (field "locale") for an unknown locale.
        """
        locale = query.locale or self._default_locale
        try:
            parse_locale(locale)
        except InvalidLocaleError as e:
            return Failure(error=from_invariant_violation(e, "locale"))

        with self._sales_order_repo.locked(query.order_id):
            order = self._sales_order_repo.find_by_id(query.order_id)
            if order is None:
                return Failure(error=sales_order_not_found(query.order_id))

            total = order.calculate_total_amount()
            # Map to DTO (Money -> Decimal for lines, Money kept for total)
            return Success(
                value=SalesOrderSummary(
                    id=order.id,
                    customer_id=order.customer_id,
                    state=order.state.value,
                    currency_code=order.currency.code,
                    ordered_at=str(order.ordered_at),
                    items=[to_item_result(item) for item in order.items],
                    total=total,
                    total_display=total.format(locale),
                    ordered_at_display=order.ordered_at.format(locale),
                )
            )
