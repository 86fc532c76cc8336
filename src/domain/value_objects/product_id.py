"""ProductId value object.

Opaque identifier of a product in the sales context. A new UUIDv7 token is
generated when no id is supplied.
"""

from dataclasses import dataclass

from uuid_extensions import uuid7


@dataclass(frozen=True)
class ProductId:
    """Product identifier compared by value.

    Attributes:
        id: Identifier token.

    Example:
        >>> ProductId("p1").equals(ProductId("p1"))
        True
    """

    id: str | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            object.__setattr__(self, "id", str(uuid7()))

    def equals(self, other: "ProductId") -> bool:
        """Value equality by id."""
        return isinstance(other, ProductId) and self.id == other.id

    def __str__(self) -> str:
        return str(self.id)
