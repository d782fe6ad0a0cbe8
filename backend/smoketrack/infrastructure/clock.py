"""Clock Implementations - system wall clock and a settable fixed clock.

Invariants:
    - Both return aware UTC datetimes
    - FixedClock never advances on its own
"""

from datetime import datetime, timedelta, timezone

from smoketrack.core.civil_time import ensure_utc


class SystemClock:
    """Wall-clock time from the host, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Deterministic clock for tests and replays."""

    def __init__(self, instant: datetime):
        self._instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = ensure_utc(instant)

    def advance(self, **delta: float) -> None:
        self._instant += timedelta(**delta)


system_clock = SystemClock()
