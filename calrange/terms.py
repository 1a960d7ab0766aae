"""Classification and resolution of a single expression operand."""

import re

from calrange.errors import UnknownTermFormat
from calrange.interval import Term
from calrange.keywords import resolve_keyword
from calrange.units import unit_millis

_KEYWORD = re.compile(r"[a-z]+")
_MAGNITUDE = re.compile(r"(-?[0-9]+)([a-z]+)")


def clean_term(text: str) -> str:
    """Drop all whitespace and lowercase."""
    return "".join(text.split()).lower()


def process_term(text: str, origin: int, tz: str | None = None) -> Term:
    """
    Resolve one operand against the origin.

    Two shapes are accepted once whitespace is removed: a bare keyword
    (``"yesterday"``) or a signed magnitude followed by a unit alias
    (``"-6h"``, ``"2 days"``). Offset terms span origin and
    origin + offset, earlier instant first.

    Raises:
        UnknownKeyword: Alphabetic text outside the keyword vocabulary
        UnknownAlias: Magnitude followed by an unknown unit alias
        UnknownTermFormat: Text matching neither shape, or a magnitude too
            long to convert
    """
    cleaned = clean_term(text)

    if _KEYWORD.fullmatch(cleaned):
        return resolve_keyword(cleaned, origin, tz)

    match = _MAGNITUDE.fullmatch(cleaned)
    if match is None:
        raise UnknownTermFormat(text.strip())

    value, alias = match.groups()
    try:
        magnitude = int(value)
    except ValueError:
        # more digits than int() will convert
        raise UnknownTermFormat(text.strip()) from None
    return Term.offset(origin, magnitude * unit_millis(alias))
