from __future__ import annotations

import bisect
import logging
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from ._exceptions import EmptyExtentError
from .interval import Interval
from .iterators import LookAheadIterator
from .limit import LowerLimit, UpperLimit

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IntervalSeq(Generic[T]):
    """
    Append-only collection of intervals, always read in sorted order.

    Members may overlap or touch; nothing is merged or de-duplicated.
    Overlaps and gaps are derived from sort-adjacent pairs only, so three
    mutually overlapping intervals report the two adjacent intersections and
    not the third.
    """

    def __init__(self, intervals: Optional[Iterable[Interval[T]]] = None) -> None:
        self._intervals: list[Interval[T]] = []
        for interval in intervals or ():
            self.append(interval)

    def append(self, interval: Interval[T]) -> None:
        bisect.insort(self._intervals, interval)

    def __iadd__(self, interval: Interval[T]) -> IntervalSeq[T]:
        self.append(interval)
        return self

    # ── iteration ────────────────────────────────────────────────────────

    def iterator(self) -> LookAheadIterator[Interval[T]]:
        return LookAheadIterator(iter(list(self._intervals)))

    def __iter__(self) -> Iterator[Interval[T]]:
        return self.iterator()

    def _adjacent_pairs(self) -> Iterator[tuple[Interval[T], Interval[T]]]:
        snapshot = list(self._intervals)
        return zip(snapshot, snapshot[1:])

    def intersections(self) -> LookAheadIterator[Interval[T]]:
        overlapping = (
            left.intersect(right)
            for left, right in self._adjacent_pairs()
            if left.intersects(right)
        )
        return LookAheadIterator(overlapping)

    def gaps(self) -> LookAheadIterator[Interval[T]]:
        between = (left.gap(right) for left, right in self._adjacent_pairs())
        return LookAheadIterator(between, lambda gap: gap is not None)

    # ── extent ───────────────────────────────────────────────────────────

    def extent(self) -> Interval[T]:
        """
        Smallest single interval covering every member.

        An extreme edge is included when any member supplying it includes it.
        """
        if not self._intervals:
            raise EmptyExtentError("Cannot compute the extent of an empty IntervalSeq.")

        lower: LowerLimit[T] = min(i.lower for i in self._intervals)
        upper: UpperLimit[T] = max(i.upper for i in self._intervals)
        lower_included = any(i.lower_included for i in self._intervals if i.lower == lower)
        upper_included = any(i.upper_included for i in self._intervals if i.upper == upper)

        extent = Interval(lower, lower_included, upper, upper_included)
        logger.debug("Extent of %d intervals: %s", len(self._intervals), extent)
        return extent

    # ── container protocol ───────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not self._intervals

    def __len__(self) -> int:
        return len(self._intervals)

    def __contains__(self, interval: object) -> bool:
        return interval in self._intervals

    def __repr__(self) -> str:
        members = ", ".join(str(i) for i in self._intervals)
        return f"IntervalSeq([{members}])"
