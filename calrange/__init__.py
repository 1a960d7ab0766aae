from .combine import Operator, combine
from .errors import (
    ErrorKind,
    InvalidOrEmpty,
    OffsetPreconditionError,
    OutOfRange,
    RangeError,
    RangeParseError,
    UnknownAlias,
    UnknownKeyword,
    UnknownTermFormat,
    UnsupportedOperation,
)
from .interval import Range, Term
from .keywords import Keyword, resolve_keyword
from .parser import NO_FILTER, parse, parse_date_input, split_expression
from .periods import day_range, month_range, week_range, year_range
from .terms import process_term
from .units import ALIASES, UNIT_MILLIS, Unit, resolve_alias

__all__ = [
    "parse_date_input",
    "parse",
    "split_expression",
    "NO_FILTER",
    "Range",
    "Term",
    "RangeError",
    "ErrorKind",
    "RangeParseError",
    "InvalidOrEmpty",
    "UnknownKeyword",
    "UnknownAlias",
    "UnknownTermFormat",
    "OffsetPreconditionError",
    "OutOfRange",
    "UnsupportedOperation",
    "Operator",
    "combine",
    "Keyword",
    "resolve_keyword",
    "process_term",
    "Unit",
    "ALIASES",
    "UNIT_MILLIS",
    "resolve_alias",
    "day_range",
    "week_range",
    "month_range",
    "year_range",
]
