"""Tests for relative keyword resolution."""

from datetime import datetime, time, timedelta, timezone

import pytest

from calrange import Keyword, Term, UnknownKeyword, resolve_keyword
from calrange.util import DAY, WEEK


def utc(*args: int) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp()) * 1000


# Monday, Mar 31 2025 15:30:00.123 UTC
ORIGIN = utc(2025, 3, 31, 15, 30) + 123


def resolve(keyword: str, origin: int = ORIGIN) -> Term:
    return resolve_keyword(keyword, origin, tz="UTC")


def test_now_is_the_origin():
    assert resolve("now") == Term(start=ORIGIN, end=ORIGIN)


def test_today():
    assert resolve("today") == Term(start=utc(2025, 3, 31), end=utc(2025, 4, 1) - 1)


def test_yesterday():
    assert resolve("yesterday") == Term(
        start=utc(2025, 3, 30), end=utc(2025, 3, 31) - 1
    )


def test_tomorrow_crosses_month_boundary():
    assert resolve("tomorrow") == Term(start=utc(2025, 4, 1), end=utc(2025, 4, 2) - 1)


def test_thisweek_starts_on_previous_sunday():
    assert resolve("thisweek") == Term(
        start=utc(2025, 3, 30), end=utc(2025, 4, 6) - 1
    )


def test_lastweek():
    assert resolve("lastweek") == Term(
        start=utc(2025, 3, 23), end=utc(2025, 3, 30) - 1
    )


def test_thismonth():
    assert resolve("thismonth") == Term(
        start=utc(2025, 3, 1), end=utc(2025, 4, 1) - 1
    )


def test_lastmonth_from_month_end_is_previous_month():
    """Test that Mar 31 minus a month clamps into February."""
    assert resolve("lastmonth") == Term(
        start=utc(2025, 2, 1), end=utc(2025, 3, 1) - 1
    )


def test_lastmonth_from_january_is_previous_december():
    assert resolve("lastmonth", utc(2025, 1, 15)) == Term(
        start=utc(2024, 12, 1), end=utc(2025, 1, 1) - 1
    )


def test_thisyear():
    assert resolve("thisyear") == Term(start=utc(2025, 1, 1), end=utc(2026, 1, 1) - 1)


def test_lastyear_from_leap_day():
    assert resolve("lastyear", utc(2024, 2, 29, 12)) == Term(
        start=utc(2023, 1, 1), end=utc(2024, 1, 1) - 1
    )


@pytest.mark.parametrize(
    ("keyword", "length"),
    [
        ("today", DAY),
        ("yesterday", DAY),
        ("tomorrow", DAY),
        ("thisweek", WEEK),
        ("lastweek", WEEK),
    ],
)
def test_fixed_period_lengths(keyword: str, length: int):
    term = resolve(keyword)

    assert term.start is not None and term.end is not None
    assert term.end - term.start + 1 == length


def test_keyword_terms_have_no_offset():
    for keyword in Keyword:
        assert resolve(keyword.value).relative_offset is None


def test_accepts_keyword_member():
    assert resolve_keyword(Keyword.NOW, ORIGIN) == Term(start=ORIGIN, end=ORIGIN)


def test_host_local_today():
    """Test that tz=None resolves against the host's local midnight."""
    local_day = datetime.fromtimestamp(ORIGIN // 1000).date()
    midnight = int(datetime.combine(local_day, time.min).timestamp()) * 1000
    yesterday = local_day - timedelta(days=1)
    yesterday_midnight = int(datetime.combine(yesterday, time.min).timestamp()) * 1000

    assert resolve_keyword("today", ORIGIN).start == midnight
    assert resolve_keyword("yesterday", ORIGIN).start == yesterday_midnight


def test_unknown_keyword():
    with pytest.raises(UnknownKeyword, match="Unknown keyword: fortnight") as exc_info:
        resolve("fortnight")

    assert exc_info.value.keyword == "fortnight"
