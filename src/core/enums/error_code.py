"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention where it reads
naturally. Used both by raised invariant violations (``exc.code``) and by
``DomainError`` values carried in ``Failure`` results.

Categories:
- Money and currency errors
- Date errors
- Sales order errors (item validation, lifecycle)
- Customer errors
- Generic resource errors
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Money / currency
    INVALID_AMOUNT = "invalid_amount"
    CURRENCY_MISMATCH = "currency_mismatch"
    INVALID_FACTOR = "invalid_factor"
    INVALID_CURRENCY_CODE = "invalid_currency_code"
    INVALID_LOCALE = "invalid_locale"

    # Dates
    INVALID_DATE = "invalid_date"
    FUTURE_DATE = "future_date"

    # Sales order items
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRODUCT_ID = "invalid_product_id"
    INVALID_UNIT_PRICE = "invalid_unit_price"

    # Sales order lifecycle
    INVALID_ORDER_STATE = "invalid_order_state"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    MISSING_CUSTOMER_ID = "missing_customer_id"

    # Customer
    EMPTY_CUSTOMER_NAME = "empty_customer_name"

    # Resource errors
    SALES_ORDER_NOT_FOUND = "sales_order_not_found"
    VALIDATION_FAILED = "validation_failed"
