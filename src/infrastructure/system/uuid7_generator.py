"""UUIDv7 id generator (implements IdGeneratorProtocol).

UUIDv7 ids are time-ordered, so orders and items sort by creation time when
sorted by id.
"""

from uuid_extensions import uuid7


class Uuid7Generator:
    """Generates string UUIDv7 identifiers."""

    def generate(self) -> str:
        """Return a new UUIDv7 as its canonical string form.

        Returns:
            str: e.g. "01890a5d-ac96-774b-bcce-b302099a8057".
        """
        return str(uuid7())
