from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, Optional, TypeVar

from ._exceptions import IllegalRangeError
from .limit import Limit, LowerLimit, UpperLimit

T = TypeVar("T")


def _unwrap(edge: Any) -> Any:
    return edge.value if isinstance(edge, Limit) else edge


@total_ordering
@dataclass(frozen=True, repr=False)
class Interval(Generic[T]):
    """
    Contiguous range of a totally ordered type between two edges.

    Each edge is a :class:`Limit` and is independently included or excluded.
    An unbounded edge (value ``None``) never carries an inclusion flag: it is
    stored as excluded and always satisfied.

    Intervals are immutable and compare structurally, so ``[5, 5]`` and the
    empty ``(5, 5)`` are different values.  Ordering is by lower edge, then by
    upper edge; inclusion flags only break the remaining ties.

    Raw values and :class:`Limit` instances are both accepted as edges::

        Interval.closed(5, 10).includes(10)        # True
        Interval.under(18).includes(-1_000_000)    # True
    """

    lower: LowerLimit[T]
    lower_included: bool
    upper: UpperLimit[T]
    upper_included: bool

    def __post_init__(self) -> None:
        lower = self.lower if isinstance(self.lower, LowerLimit) else LowerLimit(_unwrap(self.lower))
        upper = self.upper if isinstance(self.upper, UpperLimit) else UpperLimit(_unwrap(self.upper))
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        object.__setattr__(self, "lower_included", bool(self.lower_included) and not lower.is_limitless)
        object.__setattr__(self, "upper_included", bool(self.upper_included) and not upper.is_limitless)

        if not lower.is_limitless and not upper.is_limitless and upper.value < lower.value:
            raise IllegalRangeError(
                f"Lower edge {lower.value!r} is past upper edge {upper.value!r}."
            )

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def over(cls, lower: Any, lower_included: bool, upper: Any, upper_included: bool) -> Interval[T]:
        return cls(lower, lower_included, upper, upper_included)

    @classmethod
    def closed(cls, lower: Any, upper: Any) -> Interval[T]:
        return cls(lower, True, upper, True)

    @classmethod
    def open(cls, lower: Any, upper: Any) -> Interval[T]:
        return cls(lower, False, upper, False)

    @classmethod
    def under(cls, upper: Any) -> Interval[T]:
        return cls(None, False, upper, False)

    @classmethod
    def up_to(cls, upper: Any) -> Interval[T]:
        return cls(None, False, upper, True)

    @classmethod
    def and_more(cls, lower: Any) -> Interval[T]:
        return cls(lower, True, None, False)

    @classmethod
    def more_than(cls, lower: Any) -> Interval[T]:
        return cls(lower, False, None, False)

    @classmethod
    def single_element(cls, element: Any) -> Interval[T]:
        return cls(element, True, element, True)

    @classmethod
    def all(cls) -> Interval[T]:
        return cls(None, False, None, False)

    # ── edges ────────────────────────────────────────────────────────────

    @property
    def lower_limit(self) -> Optional[T]:
        return self.lower.value

    @property
    def upper_limit(self) -> Optional[T]:
        return self.upper.value

    @property
    def has_lower_limit(self) -> bool:
        return not self.lower.is_limitless

    @property
    def has_upper_limit(self) -> bool:
        return not self.upper.is_limitless

    @property
    def is_closed(self) -> bool:
        return self.lower_included and self.upper_included

    @property
    def is_open(self) -> bool:
        return not self.lower_included and not self.upper_included

    @property
    def is_single_element(self) -> bool:
        return self.is_closed and self.lower.value == self.upper.value

    @property
    def is_empty(self) -> bool:
        if not self.has_lower_limit or not self.has_upper_limit:
            return False
        return self.lower.value == self.upper.value and not self.is_closed

    # ── membership ───────────────────────────────────────────────────────

    def is_above_lower(self, value: Any) -> Any:
        if self.lower.is_limitless:
            return True
        return value >= self.lower.value if self.lower_included else value > self.lower.value

    def is_below_upper(self, value: Any) -> Any:
        if self.upper.is_limitless:
            return True
        return value <= self.upper.value if self.upper_included else value < self.upper.value

    def includes(self, value: Any) -> Any:
        """
        True when ``value`` satisfies both edges.

        NumPy arrays are accepted and produce an element-wise boolean array.
        """
        return self.is_above_lower(value) & self.is_below_upper(value)

    def __contains__(self, value: Any) -> bool:
        return bool(self.includes(value))

    # ── set operations ───────────────────────────────────────────────────

    def _greater_of_lower(self, other: Interval[T]) -> tuple[LowerLimit[T], bool]:
        c = self.lower.compare(other.lower)
        if c > 0:
            return self.lower, self.lower_included
        if c < 0:
            return other.lower, other.lower_included
        return self.lower, self.lower_included and other.lower_included

    def _lesser_of_upper(self, other: Interval[T]) -> tuple[UpperLimit[T], bool]:
        c = self.upper.compare(other.upper)
        if c < 0:
            return self.upper, self.upper_included
        if c > 0:
            return other.upper, other.upper_included
        return self.upper, self.upper_included and other.upper_included

    def intersects(self, other: Interval[T]) -> bool:
        lower, lower_included = self._greater_of_lower(other)
        upper, upper_included = self._lesser_of_upper(other)
        if lower.is_limitless or upper.is_limitless:
            return True
        if lower.value < upper.value:
            return True
        if upper.value < lower.value:
            return False
        # Both candidate edges sit on the same point.
        return lower_included and upper_included

    def intersect(self, other: Interval[T]) -> Interval[T]:
        """
        Set intersection of two intervals.

        Each edge of the result, inclusion flag and all, comes from whichever
        operand has the tighter bound.  Disjoint operands give an empty
        interval located at the greater lower edge.
        """
        lower, lower_included = self._greater_of_lower(other)
        upper, upper_included = self._lesser_of_upper(other)
        if not lower.is_limitless and not upper.is_limitless and upper.value < lower.value:
            return type(self)(lower, False, lower.value, False)
        return type(self)(lower, lower_included, upper, upper_included)

    def gap(self, other: Interval[T]) -> Optional[Interval[T]]:
        """
        The interval strictly between ``self`` and ``other``.

        Each edge of the gap excludes its point when either operand covers
        it.  Returns ``None`` when the two intersect, or when nothing lies
        between them.
        """
        if self.intersects(other):
            return None
        start = self._lesser_of_upper(other)[0].value
        end = self._greater_of_lower(other)[0].value
        start_covered = self.includes(start) or other.includes(start)
        end_covered = self.includes(end) or other.includes(end)
        result = type(self)(start, not start_covered, end, not end_covered)
        return None if result.is_empty else result

    # ── ordering ─────────────────────────────────────────────────────────

    def _sort_key(self) -> tuple[LowerLimit[T], bool, UpperLimit[T], bool]:
        return self.lower, not self.lower_included, self.upper, self.upper_included

    def compare_to(self, other: Interval[T]) -> int:
        mine, theirs = self._sort_key(), other._sort_key()
        if mine < theirs:
            return -1
        if theirs < mine:
            return 1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_to(other) < 0

    # ── representation ───────────────────────────────────────────────────

    def __str__(self) -> str:
        lower = repr(self.lower.value) if self.has_lower_limit else "-inf"
        upper = repr(self.upper.value) if self.has_upper_limit else "+inf"
        return (
            f"{'[' if self.lower_included else '('}{lower}, "
            f"{upper}{']' if self.upper_included else ')'}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"
