"""Utility constants and helpers for calrange.

Time unit constants represent durations in milliseconds.
MONTH and YEAR are calendar-naive (31 and 365 days); calendar-aware
boundaries live in :mod:`calrange.periods`.
"""

import time

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000
MONTH = 2678400000
YEAR = 31536000000


def current_millis() -> int:
    """Return the wall clock as integer milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
