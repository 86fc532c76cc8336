"""DateTime value object.

A validated point in time that is never later than the moment it was
created. Used for ``SalesOrder.ordered_at``.

Parsing:
    - datetime: used as-is; naive values are interpreted as UTC
    - date: midnight UTC of that day
    - str: ISO-8601 (``datetime.fromisoformat``, ``Z`` suffix accepted)
    - None or "": the reference "now"

The reference "now" is ``datetime.now(UTC)`` unless a ``reference`` is
passed, which is how an injected ClockProtocol reaches the value object.

Usage:
    from src.domain.value_objects import DateTime

    DateTime()                          # now
    DateTime("2024-01-15T10:30:00Z")    # parsed
    DateTime.now(clock)                 # from an injected clock
"""

from dataclasses import InitVar, dataclass
from datetime import UTC, date, datetime, time
from typing import Self

from babel.dates import format_skeleton, format_time, get_datetime_format

from src.domain.errors.invariant_errors import FutureDateError, InvalidDateError
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.value_objects.currency import parse_locale


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _parse(value: datetime | date | str) -> datetime:
    if isinstance(value, datetime):
        return _ensure_aware(value)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=UTC)
    if isinstance(value, str):
        try:
            return _ensure_aware(datetime.fromisoformat(value.strip()))
        except ValueError as e:
            raise InvalidDateError(f"Invalid date: {value!r}") from e
    raise InvalidDateError(f"Invalid date: {value!r}")


@dataclass(frozen=True)
class DateTime:
    """Immutable, timezone-aware point in time not in the future.

    Attributes:
        value: Timezone-aware datetime.

    Raises:
        InvalidDateError: If the value cannot be parsed.
        FutureDateError: If the value is strictly after the reference now.
    """

    value: datetime | date | str | None = None
    reference: InitVar[datetime | None] = None

    def __post_init__(self, reference: datetime | None) -> None:
        now = _ensure_aware(reference) if reference is not None else datetime.now(UTC)

        if self.value is None or self.value == "":
            object.__setattr__(self, "value", now)
            return

        parsed = _parse(self.value)
        if parsed > now:
            raise FutureDateError(
                f"Date cannot be in the future: {parsed.isoformat()}"
            )
        object.__setattr__(self, "value", parsed)

    @classmethod
    def now(cls, clock: ClockProtocol | None = None) -> Self:
        """Capture the current time.

        Args:
            clock: Optional clock; system UTC time when omitted.

        Returns:
            DateTime for the current moment.
        """
        return cls(reference=clock.now() if clock is not None else None)

    def format(self, locale: str | None = None) -> str:
        """Format as locale-specific numeric date and time.

        Args:
            locale: Locale tag such as "en-US"; defaults to en_US.

        Returns:
            Text with numeric year/month/day and hour/minute/second,
            e.g. "1/15/2024, 10:30:00 AM" for en_US.
        """
        loc = parse_locale(locale)
        tz = self.value.tzinfo
        date_part = format_skeleton("yMd", self.value, tzinfo=tz, locale=loc)
        time_part = format_time(self.value, format="medium", tzinfo=tz, locale=loc)
        pattern = str(get_datetime_format("medium", locale=loc))
        return (
            pattern.replace("'", "")
            .replace("{0}", time_part)
            .replace("{1}", date_part)
        )

    def __str__(self) -> str:
        """Return ISO-8601 UTC text, e.g. "2024-01-15T10:30:00.000Z"."""
        utc = self.value.astimezone(UTC)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
