"""IdGeneratorProtocol - source of unique identifiers.

Used for sales order ids, line item ids, default product ids, and customer
ids. Callers only rely on uniqueness; no ordering is assumed.
"""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Protocol for unique id generators."""

    def generate(self) -> str:
        """Return a new globally-unique string token.

        Returns:
            str: Identifier that has not been returned before.
        """
        ...
