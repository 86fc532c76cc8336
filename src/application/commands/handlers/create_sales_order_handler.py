"""CreateSalesOrder command handler.

Flow:
1. Resolve the currency (command value or configured default)
2. Build the PENDING SalesOrder aggregate
3. Store it in the repository
4. Return the new order's id and state

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repository, clock, id generator are injected)
- Invariant violations raised by the domain become Failure values here
"""

from src.application.commands.sales_order_commands import CreateSalesOrder
from src.application.dtos.sales_order_dtos import CreateSalesOrderResult
from src.application.errors import ApplicationError, from_invariant_violation
from src.core.result import Failure, Result, Success
from src.domain.entities.sales_order import SalesOrder
from src.domain.errors import InvariantViolationError, MissingCustomerIdError
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.sales_order_repository import SalesOrderRepository
from src.domain.value_objects.currency import Currency


class CreateSalesOrderHandler:
    """Handler for sales order creation command.

    Dependencies (injected via constructor):
        - SalesOrderRepository: For persistence
        - ClockProtocol: Reference time for ordered_at
        - IdGeneratorProtocol: Order and item ids
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        sales_order_repo: SalesOrderRepository,
        clock: ClockProtocol,
        id_generator: IdGeneratorProtocol,
        logger: LoggerProtocol,
        default_currency: str = "USD",
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            sales_order_repo: Sales order repository.
            clock: Clock for the ordered_at default and future check.
            id_generator: Id source for the new order and its items.
            logger: Structured logger.
            default_currency: Currency code used when the command has none.
        """
        self._sales_order_repo = sales_order_repo
        self._clock = clock
        self._id_generator = id_generator
        self._logger = logger
        self._default_currency = default_currency

    def handle(
        self, cmd: CreateSalesOrder
    ) -> Result[CreateSalesOrderResult, ApplicationError]:
        """Handle CreateSalesOrder command.

        Args:
            cmd: CreateSalesOrder command.

        Returns:
            Success(CreateSalesOrderResult): Order created in PENDING state.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED for a bad
                currency code, customer id, or order date.
        """
        # Step 1: Resolve currency
        currency_code = (
            self._default_currency if cmd.currency_code is None else cmd.currency_code
        )
        try:
            currency = Currency(currency_code)
        except InvariantViolationError as e:
            return self._reject(e, "currency_code", cmd)

        # Step 2: Build aggregate (validates customer id and order date)
        try:
            order = SalesOrder(
                cmd.customer_id,
                currency,
                cmd.ordered_at,
                clock=self._clock,
                id_generator=self._id_generator,
            )
        except InvariantViolationError as e:
            field = "customer_id" if isinstance(e, MissingCustomerIdError) else "ordered_at"
            return self._reject(e, field, cmd)

        # Step 3: Persist
        self._sales_order_repo.save(order)

        self._logger.info(
            "sales_order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            currency=currency.code,
        )

        return Success(
            value=CreateSalesOrderResult(
                order_id=order.id,
                state=order.state.value,
                currency_code=currency.code,
                ordered_at=str(order.ordered_at),
            )
        )

    def _reject(
        self, error: InvariantViolationError, field: str, cmd: CreateSalesOrder
    ) -> Failure[ApplicationError]:
        self._logger.warning(
            "sales_order_creation_rejected",
            customer_id=cmd.customer_id,
            field=field,
            error_code=error.code.value,
        )
        return Failure(error=from_invariant_violation(error, field))
