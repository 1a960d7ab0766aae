from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Range:
    """Resolved time range in epoch milliseconds.

    No ordering is enforced: ``start`` may be greater than ``end`` when a
    sequence names the later instant first (``"today -> yesterday"``).
    """

    start: int
    end: int

    @property
    def duration(self) -> int:
        """Signed distance from start to end in milliseconds."""
        return self.end - self.start

    def as_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return f"Range({self.start}→{self.end}, {self.duration}ms)"


@dataclass(frozen=True, kw_only=True)
class Term:
    """Resolved meaning of one operand of a range expression.

    Keyword terms carry ``start`` and ``end``. Offset terms additionally
    carry the signed ``relative_offset`` they were built from.
    """

    relative_offset: int | None = None
    start: int | None = None
    end: int | None = None

    @classmethod
    def period(cls, bounds: Range) -> "Term":
        return cls(start=bounds.start, end=bounds.end)

    @classmethod
    def offset(cls, origin: int, relative_offset: int) -> "Term":
        """Window between origin and origin + relative_offset, earliest first."""
        if relative_offset < 0:
            return cls(
                relative_offset=relative_offset,
                start=origin + relative_offset,
                end=origin,
            )
        return cls(
            relative_offset=relative_offset,
            start=origin,
            end=origin + relative_offset,
        )

    @property
    def is_offset(self) -> bool:
        return self.relative_offset is not None
