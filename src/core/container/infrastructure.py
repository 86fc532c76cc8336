"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Clock (system UTC clock)
- Id generation (UUIDv7)
- Sales order repository (in-memory, per-order locking)

Call ``cache_clear()`` on a factory to drop its singleton (tests do this
after patching settings).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.clock_protocol import ClockProtocol
    from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.sales_order_repository import SalesOrderRepository


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    use_json = env in {"testing", "ci", "production"}
    return ConsoleAdapter(use_json=use_json, log_level=settings.log_level)


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Return the system clock singleton (UTC)."""
    from src.infrastructure.system.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_id_generator() -> "IdGeneratorProtocol":
    """Return the UUIDv7 id generator singleton."""
    from src.infrastructure.system.uuid7_generator import Uuid7Generator

    return Uuid7Generator()


@lru_cache()
def get_sales_order_repository() -> "SalesOrderRepository":
    """Return the sales order repository singleton.

    The in-memory store lives as long as the process, so every handler
    obtained from this container sees the same orders.

    Returns:
        SalesOrderRepository: InMemorySalesOrderRepository instance.
    """
    from src.infrastructure.persistence.in_memory_sales_order_repository import (
        InMemorySalesOrderRepository,
    )

    return InMemorySalesOrderRepository()
