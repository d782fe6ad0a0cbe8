"""Civil Time - calendar boundaries in one fixed civil timezone, expressed in UTC.

Invariants:
    - Stored instants are UTC; every boundary returned here is a UTC-aware datetime
    - Day/week/month semantics use the fixed civil offset (UTC+8 by default),
      never the host timezone and never the caller's browser zone
    - Fixed offset: no DST rules
    - Weeks start on Monday 00:00 civil time (ISO)

Design Decisions:
    - datetime.timezone(timedelta) over zoneinfo: the zone is a constant offset,
      so results are identical on any host with or without tzdata
    - Functions take `now` explicitly; callers get it from an injected clock
"""

from datetime import datetime, timedelta, timezone, tzinfo


DEFAULT_OFFSET_HOURS: int = 8
CIVIL_TZ: tzinfo = timezone(timedelta(hours=DEFAULT_OFFSET_HOURS), "UTC+08:00")


def civil_zone(offset_hours: int) -> tzinfo:
    """Build a fixed-offset civil zone."""
    if offset_hours == DEFAULT_OFFSET_HOURS:
        return CIVIL_TZ
    return timezone(timedelta(hours=offset_hours))


def ensure_utc(instant: datetime) -> datetime:
    """Normalize to an aware UTC datetime. Naive values are read as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def to_civil(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Same instant, wall-clock fields in the civil zone."""
    return ensure_utc(instant).astimezone(tz)


def civil_now(now: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Current instant shifted into the civil zone. For calendar math only."""
    return to_civil(now, tz)


def _civil_midnight_utc(year: int, month: int, day: int, tz: tzinfo) -> datetime:
    return datetime(year, month, day, tzinfo=tz).astimezone(timezone.utc)


def start_of_civil_day(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Civil midnight covering `instant`, in UTC."""
    local = to_civil(instant, tz)
    return _civil_midnight_utc(local.year, local.month, local.day, tz)


def end_of_civil_day(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Last microsecond of the civil day covering `instant`, in UTC."""
    return start_of_civil_day(instant, tz) + timedelta(days=1, microseconds=-1)


def start_of_civil_week(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Monday 00:00 civil time of the week containing `instant`, in UTC."""
    local = to_civil(instant, tz)
    return start_of_civil_day(instant, tz) - timedelta(days=local.weekday())


def start_of_civil_month(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """1st of the month 00:00 civil time, in UTC."""
    local = to_civil(instant, tz)
    return _civil_midnight_utc(local.year, local.month, 1, tz)


def days_ago(n: int, now: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Start of the civil day `n` days before today, in UTC."""
    return start_of_civil_day(now, tz) - timedelta(days=n)


def civil_date_key(instant: datetime, tz: tzinfo = CIVIL_TZ) -> str:
    """YYYY-MM-DD civil date, used as a grouping key."""
    return to_civil(instant, tz).strftime("%Y-%m-%d")


def civil_hour(instant: datetime, tz: tzinfo = CIVIL_TZ) -> int:
    return to_civil(instant, tz).hour


def is_civil_today(instant: datetime, now: datetime, tz: tzinfo = CIVIL_TZ) -> bool:
    return civil_date_key(instant, tz) == civil_date_key(now, tz)


def civil_days_between(start: datetime, end: datetime, tz: tzinfo = CIVIL_TZ) -> int:
    """Whole civil days from the date of `start` to the date of `end`."""
    return (to_civil(end, tz).date() - to_civil(start, tz).date()).days
