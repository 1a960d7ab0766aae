"""Time units and the human aliases that name them.

Magnitudes are fixed and calendar-naive: a month is 31 days and a year is
365 days.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from calrange.errors import UnknownAlias
from calrange.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR


class Unit(Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


UNIT_MILLIS: Mapping[Unit, int] = MappingProxyType(
    {
        Unit.YEAR: YEAR,
        Unit.MONTH: MONTH,
        Unit.DAY: DAY,
        Unit.HOUR: HOUR,
        Unit.MINUTE: MINUTE,
        Unit.SECOND: SECOND,
    }
)

_ALIAS_GROUPS: dict[Unit, tuple[str, ...]] = {
    Unit.YEAR: ("y", "yr", "yrs", "year", "years"),
    Unit.MONTH: ("mo", "mon", "mos", "mons", "month", "months"),
    Unit.DAY: ("d", "dy", "dys", "day", "days"),
    Unit.HOUR: ("h", "hr", "hrs", "hour", "hours"),
    Unit.MINUTE: ("m", "min", "mins", "minute", "minutes"),
    Unit.SECOND: ("s", "sec", "secs", "second", "seconds"),
}

# Mapping from lowercase alias to canonical unit
ALIASES: Mapping[str, Unit] = MappingProxyType(
    {alias: unit for unit, group in _ALIAS_GROUPS.items() for alias in group}
)


def resolve_alias(text: str) -> Unit:
    """Return the unit named by ``text`` (case- and whitespace-insensitive).

    Raises:
        UnknownAlias: If no unit has that alias
    """
    alias = "".join(text.split()).lower()
    unit = ALIASES.get(alias)
    if unit is None:
        raise UnknownAlias(alias)
    return unit


def unit_millis(text: str) -> int:
    """Return the millisecond magnitude of the unit named by ``text``."""
    return UNIT_MILLIS[resolve_alias(text)]
