"""Sales order queries (CQRS read operations).

Queries represent requests for data without side effects.
They are immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetSalesOrder:
    """Retrieve a single sales order with totals and display strings.

    Attributes:
        order_id: Sales order identifier.
        locale: Locale for display strings (e.g. "en-US"); the configured
            default when omitted.

    Example:
        >>> query = GetSalesOrder(order_id="0190...", locale="de-DE")
        >>> result = handler.handle(query)
    """

    order_id: str
    locale: str | None = None
