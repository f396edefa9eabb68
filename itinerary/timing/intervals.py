"""Pure interval arithmetic over anything with ``start`` and ``end``.

Intervals are half-open: ``[start, end)``. Touching intervals do not overlap,
and a zero-duration interval overlaps nothing.
"""

from datetime import date, datetime, timedelta
from typing import Protocol, TypeVar

Instant = TypeVar("Instant", datetime, date)


class Span(Protocol[Instant]):
    """Anything exposing comparable start and end bounds."""

    @property
    def start(self) -> Instant: ...

    @property
    def end(self) -> Instant: ...


def overlaps(a: Span[Instant], b: Span[Instant]) -> bool:
    """True iff the two half-open intervals share at least one instant.

    An empty interval contains no instant, so it overlaps nothing even when
    it sits strictly inside the other one.
    """
    if a.start == a.end or b.start == b.end:
        return False
    return a.start < b.end and b.start < a.end


def gap(a: Span[Instant], b: Span[Instant]) -> timedelta | None:
    """Time between the end of ``a`` and the start of ``b``, if positive."""
    delta = b.start - a.end
    if delta > timedelta(0):
        return delta
    return None


def contained_within(inner: Span[Instant], outer: Span[Instant]) -> bool:
    """True iff ``inner`` lies entirely inside ``outer`` (bounds inclusive)."""
    return outer.start <= inner.start and inner.end <= outer.end


def duration(interval: Span[Instant]) -> timedelta:
    """Length of an interval."""
    return interval.end - interval.start
