"""Unit tests for Customer entity."""

import pytest

from src.core.enums import ErrorCode
from src.domain.entities.customer import Customer
from src.domain.errors import EmptyCustomerNameError


@pytest.mark.unit
class TestCustomer:
    """Test Customer construction."""

    def test_create_with_name(self):
        """Test name is kept and an id generated."""
        customer = Customer("Ada Lovelace")

        assert customer.name == "Ada Lovelace"
        assert customer.id is not None

    def test_keeps_given_id(self):
        """Test a provided id is kept."""
        assert Customer("Ada", id="c1").id == "c1"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_raises(self, name):
        """Test empty or whitespace-only names raise EmptyCustomerNameError."""
        with pytest.raises(EmptyCustomerNameError) as exc_info:
            Customer(name)

        assert exc_info.value.code == ErrorCode.EMPTY_CUSTOMER_NAME

    def test_last_order_price_starts_empty(self):
        """Test last_order_price is None for a new customer."""
        assert Customer("Ada").last_order_price is None

    def test_last_order_price_is_read_only(self):
        """Test last_order_price cannot be assigned."""
        customer = Customer("Ada")

        with pytest.raises(AttributeError):
            customer.last_order_price = None  # type: ignore[misc]
