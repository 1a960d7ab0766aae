"""Error taxonomy for range expressions.

Every failure is raised as a :class:`RangeParseError` subclass where it is
detected and converted to a :class:`RangeError` value by the top-level
parser. ``str(exc)`` is the caller-facing message.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    INVALID_OR_EMPTY = "invalid_or_empty"
    UNKNOWN_KEYWORD = "unknown_keyword"
    UNKNOWN_ALIAS = "unknown_alias"
    UNKNOWN_TERM = "unknown_term"
    OFFSET_PRECONDITION = "offset_precondition"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    OUT_OF_RANGE = "out_of_range"


class RangeParseError(ValueError):
    kind: ErrorKind


class InvalidOrEmpty(RangeParseError):
    kind = ErrorKind.INVALID_OR_EMPTY

    def __init__(self) -> None:
        super().__init__("Invalid or empty time range")


class UnknownKeyword(RangeParseError):
    kind = ErrorKind.UNKNOWN_KEYWORD

    def __init__(self, keyword: str) -> None:
        self.keyword: str = keyword
        super().__init__(f"Unknown keyword: {keyword}")


class UnknownAlias(RangeParseError):
    kind = ErrorKind.UNKNOWN_ALIAS

    def __init__(self, alias: str) -> None:
        self.alias: str = alias
        super().__init__(f"Unknown time alias: {alias}")


class UnknownTermFormat(RangeParseError):
    kind = ErrorKind.UNKNOWN_TERM

    def __init__(self, text: str) -> None:
        self.text: str = text
        super().__init__(f"Unknown term: {text}")


class OffsetPreconditionError(RangeParseError):
    kind = ErrorKind.OFFSET_PRECONDITION

    def __init__(self) -> None:
        super().__init__("Offset range requires a start time and a relative time")


class UnsupportedOperation(RangeParseError):
    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, operator: str) -> None:
        self.operator: str = operator
        super().__init__(f"Unsupported or unimplemented operation: {operator}")

class OutOfRange(RangeParseError):
    """Calendar arithmetic left the range datetime can represent."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, instant: int) -> None:
        self.instant: int = instant
        super().__init__(f"Time out of range: {instant}")


@dataclass(frozen=True, kw_only=True)
class RangeError:
    """Failed parse result: a message plus its structured kind."""

    error: str
    kind: ErrorKind

    @classmethod
    def from_exception(cls, exc: RangeParseError) -> "RangeError":
        return cls(error=str(exc), kind=exc.kind)

    def as_dict(self) -> dict[str, str]:
        return {"error": self.error}
