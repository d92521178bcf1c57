from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


@total_ordering
@dataclass(frozen=True)
class Limit(Generic[T]):
    """
    One edge of an interval: a concrete value, or ``None`` for "no limit".

    The meaning of ``None`` depends on the role of the edge, so the role is
    part of the type.  A :class:`LowerLimit` without a value sorts below every
    concrete value, an :class:`UpperLimit` without a value sorts above every
    concrete value.  Limits of different roles do not order against each
    other, and a bare :class:`Limit` has no role and does not order at all.
    """

    value: T | None = None

    # Sign of an unbounded limit when compared to a concrete one; 0 means no role.
    _UNBOUNDED: ClassVar[int] = 0

    @property
    def is_limitless(self) -> bool:
        return self.value is None

    def compare(self, other: Limit[T]) -> int:
        if not self._UNBOUNDED:
            raise TypeError("A Limit without a role cannot be compared; use LowerLimit or UpperLimit.")
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}."
            )
        if self.value is None:
            return 0 if other.value is None else self._UNBOUNDED
        if other.value is None:
            return -self._UNBOUNDED
        if self.value < other.value:
            return -1
        if other.value < self.value:
            return 1
        return 0

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) < 0

    def __repr__(self) -> str:
        shown = "Limitless" if self.value is None else repr(self.value)
        return f"{type(self).__name__}({shown})"


@dataclass(frozen=True, repr=False)
class LowerLimit(Limit[T]):
    _UNBOUNDED: ClassVar[int] = -1


@dataclass(frozen=True, repr=False)
class UpperLimit(Limit[T]):
    _UNBOUNDED: ClassVar[int] = 1
