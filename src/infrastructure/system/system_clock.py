"""System clock adapter (implements ClockProtocol)."""

from datetime import UTC, datetime


class SystemClock:
    """Wall clock returning timezone-aware UTC datetimes."""

    def now(self) -> datetime:
        return datetime.now(UTC)
