"""SalesOrderItem domain entity.

A line of a sales order: which product, how many, and at what unit price.
Items are created only by ``SalesOrder.add_item`` and never change after
construction.
"""

from dataclasses import dataclass

from uuid_extensions import uuid7

from src.domain.errors.invariant_errors import InvalidQuantityError
from src.domain.value_objects.money import Money
from src.domain.value_objects.product_id import ProductId


@dataclass(frozen=True)
class SalesOrderItem:
    """Immutable sales order line item.

    The product id and unit price are validated by the owning order before
    the item is built; the item itself only guards its quantity.

    Attributes:
        order_id: Id of the owning sales order (back-reference).
        product_id: Ordered product.
        quantity: Number of units, always > 0.
        unit_price: Price per unit.
        item_id: Unique line id, generated when omitted.

    Raises:
        InvalidQuantityError: If quantity is not a positive integer.
    """

    order_id: str
    product_id: ProductId
    quantity: int
    unit_price: Money
    item_id: str | None = None

    def __post_init__(self) -> None:
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise InvalidQuantityError(
                f"Quantity must be greater than zero: {self.quantity!r}"
            )
        if self.item_id is None:
            object.__setattr__(self, "item_id", str(uuid7()))

    def calculate_item_total(self) -> Money:
        """Total for this line (unit price × quantity).

        Returns:
            Money in the unit price's currency.
        """
        return Money(
            self.unit_price.multiply(self.quantity).amount, self.unit_price.currency
        )
