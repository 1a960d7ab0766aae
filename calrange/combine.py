"""Operators joining the two operands of a range expression."""

from enum import Enum

from calrange.errors import OffsetPreconditionError, UnsupportedOperation
from calrange.interval import Range, Term


class Operator(Enum):
    SINGLE = ""
    SEQUENCE = "->"
    OFFSET = "<>"


def _first_set(*values: int | None, default: int) -> int:
    return next((value for value in values if value is not None), default)


def single_range(term: Term, origin: int) -> Range:
    """Range covered by one term; missing fields fall back to origin."""
    return Range(
        start=_first_set(term.start, default=origin),
        end=_first_set(term.end, term.start, default=origin),
    )


def sequence_range(first: Term, second: Term, origin: int) -> Range:
    """From the start of ``first`` to the end of ``second``.

    Operands are used positionally and never reordered, so a later first
    operand yields a range with start > end.
    """
    return Range(
        start=_first_set(first.start, default=origin),
        end=_first_set(second.end, second.start, default=origin),
    )


def offset_range(anchor: Term, offset: Term) -> Range:
    """Window between the anchor's start and that start moved by the offset.

    The earlier instant comes first: ``today <> 2d`` runs from midnight
    forward, ``now <> -6h`` ends at now.

    Raises:
        OffsetPreconditionError: If the anchor has no start or the offset
            term is not a magnitude+unit term
    """
    if anchor.start is None or offset.relative_offset is None:
        raise OffsetPreconditionError()
    moved = anchor.start + offset.relative_offset
    return Range(start=min(anchor.start, moved), end=max(anchor.start, moved))


def combine(
    operator: str | Operator,
    first: Term | None,
    second: Term | None,
    origin: int,
) -> Range:
    """
    Merge resolved operands according to the operator.

    Args:
        operator: ``""`` (single term), ``"->"`` (sequence) or ``"<>"``
            (offset from anchor)
        first: Left operand, None when absent
        second: Right operand, None when absent
        origin: Instant the operands were resolved against

    Raises:
        UnsupportedOperation: For any other operator, or when the operands
            present do not fit the operator
        OffsetPreconditionError: See :func:`offset_range`
    """
    try:
        op = Operator(operator)
    except ValueError:
        raise UnsupportedOperation(str(operator)) from None

    if op is Operator.SINGLE and first is not None and second is None:
        return single_range(first, origin)
    if op is Operator.SEQUENCE and first is not None and second is not None:
        return sequence_range(first, second, origin)
    if op is Operator.OFFSET and first is not None and second is not None:
        return offset_range(first, second)
    raise UnsupportedOperation(op.value)
