from datetime import UTC, datetime

from payments_settlement.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Stamps registrations with the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Always returns the same instant, converted to UTC.

    Used by tests and replays that need deterministic registration times.
    """

    def __init__(self, instant: datetime) -> None:
        if instant.utcoffset() is None:
            raise ValueError(f"FixedTimeProvider needs an aware datetime, got {instant!r}")
        self._instant = instant.astimezone(UTC)

    def now(self) -> datetime:
        return self._instant
