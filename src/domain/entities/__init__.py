"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.customer import Customer
from src.domain.entities.sales_order import SalesOrder
from src.domain.entities.sales_order_item import SalesOrderItem

__all__ = [
    "Customer",
    "SalesOrder",
    "SalesOrderItem",
]
