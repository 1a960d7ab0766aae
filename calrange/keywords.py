"""Relative keywords ("today", "lastweek", ...) resolved against an origin."""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType

from calrange.errors import UnknownKeyword
from calrange.interval import Range, Term
from calrange.periods import day_range, month_range, shift, week_range, year_range


class Keyword(Enum):
    NOW = "now"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    THISWEEK = "thisweek"
    LASTWEEK = "lastweek"
    THISMONTH = "thismonth"
    LASTMONTH = "lastmonth"
    THISYEAR = "thisyear"
    LASTYEAR = "lastyear"


_Resolver = Callable[[int, str | None], Range]

_RESOLVERS: Mapping[Keyword, _Resolver] = MappingProxyType(
    {
        Keyword.NOW: lambda origin, tz: Range(start=origin, end=origin),
        Keyword.TODAY: lambda origin, tz: day_range(origin, tz),
        Keyword.YESTERDAY: lambda origin, tz: day_range(
            shift(origin, days=-1, tz=tz), tz
        ),
        Keyword.TOMORROW: lambda origin, tz: day_range(
            shift(origin, days=1, tz=tz), tz
        ),
        Keyword.THISWEEK: lambda origin, tz: week_range(origin, tz),
        Keyword.LASTWEEK: lambda origin, tz: week_range(
            shift(origin, days=-7, tz=tz), tz
        ),
        Keyword.THISMONTH: lambda origin, tz: month_range(origin, tz),
        Keyword.LASTMONTH: lambda origin, tz: month_range(
            shift(origin, months=-1, tz=tz), tz
        ),
        Keyword.THISYEAR: lambda origin, tz: year_range(origin, tz),
        Keyword.LASTYEAR: lambda origin, tz: year_range(
            shift(origin, years=-1, tz=tz), tz
        ),
    }
)


def resolve_keyword(
    keyword: str | Keyword, origin: int, tz: str | None = None
) -> Term:
    """
    Resolve a relative keyword to the period it names.

    Args:
        keyword: Keyword name (lowercase, no whitespace) or Keyword member
        origin: Reference instant in epoch milliseconds
        tz: IANA timezone name, or None for the host's local zone

    Returns:
        Term with start and end set (no relative offset)

    Raises:
        UnknownKeyword: If keyword is not in the vocabulary
    """
    try:
        member = Keyword(keyword)
    except ValueError:
        raise UnknownKeyword(str(keyword)) from None
    return Term.period(_RESOLVERS[member](origin, tz))
