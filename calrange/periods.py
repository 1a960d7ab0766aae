"""Calendar period boundaries in local wall-clock time.

Each period function returns the inclusive :class:`Range` of the day, week,
month or year containing an instant. Boundaries are computed from local
date fields, so results depend on the time zone: ``tz=None`` uses the host's
configured zone, otherwise ``tz`` is an IANA name such as ``"US/Pacific"``.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from calrange.errors import OutOfRange
from calrange.interval import Range
from calrange.util import DAY, WEEK


def resolve_zone(tz: str | None) -> tzinfo | None:
    """Return the ZoneInfo for an IANA name, or None for host local time."""
    return None if tz is None else ZoneInfo(tz)


def _midnight(day: date, zone: tzinfo | None) -> int:
    """Epoch milliseconds of local midnight starting ``day``."""
    # naive datetimes are interpreted as host local time by timestamp()
    return int(datetime.combine(day, time.min, tzinfo=zone).timestamp()) * 1000


def _local(instant: int, zone: tzinfo | None) -> datetime:
    seconds, millis = divmod(instant, 1000)
    return datetime.fromtimestamp(seconds, tz=zone) + timedelta(milliseconds=millis)


def local_datetime(instant: int, tz: str | None = None) -> datetime:
    """Convert epoch milliseconds to a local datetime (naive when tz is None)."""
    return _local(instant, resolve_zone(tz))


def shift(
    instant: int,
    *,
    days: int = 0,
    months: int = 0,
    years: int = 0,
    tz: str | None = None,
) -> int:
    """Move an instant by whole local calendar units.

    Month and year shifts clamp the day of month to the target month's
    length, so March 31 minus one month is the last day of February.

    Raises:
        OutOfRange: If the instant or the result is outside the years
            datetime supports
    """
    zone = resolve_zone(tz)
    try:
        moved = _local(instant, zone) + relativedelta(
            days=days, months=months, years=years
        )
        whole = int(moved.replace(microsecond=0).timestamp())
    except (ValueError, OverflowError, OSError) as exc:
        raise OutOfRange(instant) from exc
    return whole * 1000 + moved.microsecond // 1000


class _Period:
    """Base class for calendar periods resolved from a local date."""

    def bounds(self, day: date, zone: tzinfo | None) -> Range:
        """Return the range of the period containing ``day``."""
        raise NotImplementedError

    def __call__(self, instant: int, tz: str | None = None) -> Range:
        zone = resolve_zone(tz)
        try:
            return self.bounds(_local(instant, zone).date(), zone)
        except (ValueError, OverflowError, OSError) as exc:
            raise OutOfRange(instant) from exc


class Day(_Period):
    @override
    def bounds(self, day: date, zone: tzinfo | None) -> Range:
        start = _midnight(day, zone)
        return Range(start=start, end=start + DAY - 1)


class Week(_Period):
    """Seven days starting on Sunday."""

    @override
    def bounds(self, day: date, zone: tzinfo | None) -> Range:
        # date.weekday() is Monday=0; shift so Sunday is day 0
        first = day - timedelta(days=(day.weekday() + 1) % 7)
        start = _midnight(first, zone)
        return Range(start=start, end=start + WEEK - 1)


class Month(_Period):
    @override
    def bounds(self, day: date, zone: tzinfo | None) -> Range:
        first = day.replace(day=1)
        following = first + relativedelta(months=1)
        return Range(
            start=_midnight(first, zone), end=_midnight(following, zone) - 1
        )


class Year(_Period):
    @override
    def bounds(self, day: date, zone: tzinfo | None) -> Range:
        first = date(day.year, 1, 1)
        following = date(day.year + 1, 1, 1)
        return Range(
            start=_midnight(first, zone), end=_midnight(following, zone) - 1
        )


day_range: Day = Day()
week_range: Week = Week()
month_range: Month = Month()
year_range: Year = Year()
