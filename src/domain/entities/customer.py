"""Customer domain entity (CRM bounded context).

Independent of the sales order aggregate; an order only refers to a customer
by id.
"""

from dataclasses import dataclass, field

from uuid_extensions import uuid7

from src.domain.errors.invariant_errors import EmptyCustomerNameError
from src.domain.value_objects.money import Money


@dataclass(eq=False)
class Customer:
    """Customer record.

    Attributes:
        name: Customer name (non-blank).
        id: Unique customer id, generated when omitted.
        last_order_price: Price of the customer's last order, None until one
            exists. Read-only; nothing in this model updates it.

    Raises:
        EmptyCustomerNameError: If name is empty or whitespace-only.
    """

    name: str
    id: str | None = field(default=None, kw_only=True)
    _last_order_price: Money | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise EmptyCustomerNameError("Customer name cannot be empty")
        if self.id is None:
            self.id = str(uuid7())

    @property
    def last_order_price(self) -> Money | None:
        return self._last_order_price
