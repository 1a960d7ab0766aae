"""Top-level entry point: range expression text to a Range or RangeError.

Grammar::

    expression := term [operator term]
    operator   := "->" | "<>"
    term       := keyword | ["-"] digits alias

All terms of one call resolve against a single origin instant read once
from the clock (or passed as ``now``).
"""

import logging
import re

from calrange.combine import combine
from calrange.errors import (
    InvalidOrEmpty,
    RangeError,
    RangeParseError,
    UnknownTermFormat,
)
from calrange.interval import Range, Term
from calrange.terms import process_term
from calrange.util import current_millis

logger = logging.getLogger(__name__)

# Placeholder filter-bar value meaning "no range selected"
NO_FILTER = "No filter"

# A lone "<" is accepted here and rejected by the combinator
_EXPRESSION = re.compile(r"\s*([^<>]*[^<>-])?\s*(->|<>|<)?\s*([^<>]+)?\s*")


def split_expression(text: str) -> tuple[str | None, str, str | None]:
    """
    Split an expression into (first term, operator, second term).

    Terms are stripped of surrounding whitespace. The operator is ``""``
    for single-term input; absent terms are None.

    Raises:
        UnknownTermFormat: If text remains after the second term
    """
    stripped = text.strip()
    match = _EXPRESSION.match(stripped)
    if match is None:
        raise UnknownTermFormat(stripped)
    rest = stripped[match.end():]
    if rest:
        raise UnknownTermFormat(rest.strip())
    first, operator, second = match.groups()
    return _clean(first), operator or "", _clean(second)


def _clean(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return text.strip()


def _resolve(text: str | None, origin: int, tz: str | None) -> Term | None:
    if text is None:
        return None
    return process_term(text, origin, tz)


def parse_date_input(
    text: str | None,
    *,
    now: int | None = None,
    tz: str | None = None,
) -> Range | RangeError:
    """
    Parse a range expression relative to now.

    Args:
        text: Expression such as ``"today"``, ``"now -> 6h"`` or
            ``"yesterday <> 3d"``
        now: Origin in epoch milliseconds (default: the wall clock)
        tz: IANA timezone name for calendar keywords (default: host local)

    Returns:
        Range on success, RangeError describing the first failure otherwise.
        Expression errors are never raised.

    Examples:
        >>> parse_date_input("now -> 6h", now=0)
        Range(start=0, end=21600000)
        >>> parse_date_input("now -> 1xyz", now=0)
        RangeError(error='Unknown time alias: xyz', kind=<ErrorKind.UNKNOWN_ALIAS: 'unknown_alias'>)
    """
    if not text or text == NO_FILTER:
        return RangeError.from_exception(InvalidOrEmpty())

    origin = current_millis() if now is None else now

    try:
        first_text, operator, second_text = split_expression(text)
        first = _resolve(first_text, origin, tz)
        second = _resolve(second_text, origin, tz)
        return combine(operator, first, second, origin)
    except RangeParseError as exc:
        logger.debug("Rejected time range %r: %s", text, exc)
        return RangeError.from_exception(exc)


def parse(
    text: str | None,
    *,
    now: int | None = None,
    tz: str | None = None,
) -> dict[str, int] | dict[str, str]:
    """Like :func:`parse_date_input`, as ``{"start", "end"}`` or ``{"error"}``."""
    return parse_date_input(text, now=now, tz=tz).as_dict()
