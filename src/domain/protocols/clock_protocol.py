"""ClockProtocol - source of the current time.

DateTime defaults and the not-in-the-future rule both depend on "now".
Taking it from an injected clock keeps that dependency explicit and lets
tests pin time without patching globals.

Usage:
    from src.domain.protocols import ClockProtocol

    def stamp(clock: ClockProtocol) -> DateTime:
        return DateTime.now(clock)
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Protocol for current-time providers.

    Implementations should return timezone-aware datetimes. Naive values
    are interpreted as UTC by DateTime.
    """

    def now(self) -> datetime:
        """Return the current point in time.

        Returns:
            datetime: Current time, preferably timezone-aware (UTC).
        """
        ...
