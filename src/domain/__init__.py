"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, and protocols
(ports). The domain layer has NO dependencies on application or
infrastructure code; its only third-party imports are Babel (locale
formatting) and uuid7 (identifier generation).

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Sales order lifecycle states and actions
- errors/: Invariant violations (raised) and SalesOrderError (returned)
- protocols/: Domain protocols (repository and service interfaces)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
