"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
SalesOrderRepository is imported from its module directly to avoid an
entities → protocols → entities import cycle.

Usage:
    from src.domain.protocols import ClockProtocol, IdGeneratorProtocol
    from src.domain.protocols.sales_order_repository import SalesOrderRepository
"""

from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ClockProtocol",
    "IdGeneratorProtocol",
    "LoggerProtocol",
]
