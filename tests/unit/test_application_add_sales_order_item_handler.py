"""Unit tests for AddSalesOrderItemHandler."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.commands.handlers.add_sales_order_item_handler import (
    AddSalesOrderItemHandler,
)
from src.application.commands.sales_order_commands import AddSalesOrderItem
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.errors import SalesOrderError
from src.infrastructure.persistence import InMemorySalesOrderRepository
from tests.conftest import create_sales_order


@pytest.fixture
def repo():
    repo = InMemorySalesOrderRepository()
    repo.save(create_sales_order())  # id "order-1"
    return repo


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def handler(repo, logger):
    return AddSalesOrderItemHandler(sales_order_repo=repo, logger=logger)


def add_cmd(**overrides) -> AddSalesOrderItem:
    values = {
        "order_id": "order-1",
        "product_id": "p1",
        "quantity": 2,
        "unit_price": "10.00",
    } | overrides
    return AddSalesOrderItem(**values)


@pytest.mark.unit
class TestAddSalesOrderItemHandler:
    """Test AddSalesOrderItemHandler."""

    def test_adds_item_and_returns_total(self, handler, repo):
        """Test the item is appended and the new total returned."""
        result = handler.handle(add_cmd())

        assert isinstance(result, Success)
        assert result.value.item_count == 1
        assert result.value.total_amount == Decimal("20.00")
        assert result.value.item.product_id == "p1"
        assert result.value.item.total == Decimal("20.00")
        assert repo.find_by_id("order-1").item_count == 1

    def test_logs_item_added(self, handler, logger):
        """Test sales_order_item_added is logged."""
        handler.handle(add_cmd())

        assert logger.info.call_args.args[0] == "sales_order_item_added"
        assert logger.info.call_args.kwargs["order_id"] == "order-1"

    def test_unknown_order_not_found(self, handler):
        """Test an unknown id yields NOT_FOUND."""
        result = handler.handle(add_cmd(order_id="missing"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert isinstance(result.error.domain_error, NotFoundError)
        assert result.error.domain_error.code == ErrorCode.SALES_ORDER_NOT_FOUND
        assert result.error.domain_error.resource_id == "missing"

    @pytest.mark.parametrize(
        ("overrides", "error_code"),
        [
            ({"product_id": " "}, ErrorCode.INVALID_PRODUCT_ID),
            ({"quantity": 0}, ErrorCode.INVALID_QUANTITY),
            ({"unit_price": "0"}, ErrorCode.INVALID_UNIT_PRICE),
        ],
    )
    def test_invalid_input_is_validation_failure(
        self, handler, repo, logger, overrides, error_code
    ):
        """Test bad input maps to COMMAND_VALIDATION_FAILED and changes nothing."""
        result = handler.handle(add_cmd(**overrides))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert isinstance(result.error.domain_error, SalesOrderError)
        assert result.error.domain_error.code == error_code
        assert repo.find_by_id("order-1").item_count == 0
        logger.warning.assert_called_once()

    def test_terminal_order_is_conflict(self, handler, repo):
        """Test adding to a shipped order maps to CONFLICT."""
        order = repo.find_by_id("order-1")
        order.confirm()
        order.ship()

        result = handler.handle(add_cmd())

        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.domain_error.code == ErrorCode.INVALID_ORDER_STATE
        assert result.error.details == {"state": "SHIPPED"}

    def test_missing_product_id_is_rejected_not_generated(self, handler, repo):
        """Test product_id=None yields INVALID_PRODUCT_ID instead of a new id."""
        result = handler.handle(add_cmd(product_id=None))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.code == ErrorCode.INVALID_PRODUCT_ID
        assert repo.find_by_id("order-1").item_count == 0
