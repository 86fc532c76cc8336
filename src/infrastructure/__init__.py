"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- logging/: structlog console adapter (LoggerProtocol)
- persistence/: in-memory sales order repository (SalesOrderRepository)
- system/: system clock and UUIDv7 generator (ClockProtocol, IdGeneratorProtocol)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
