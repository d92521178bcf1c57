"""
baseunits.intervals
~~~~~~~~~~~~~~~~~~~

Ranges over any totally ordered type, with edges that may be unbounded, and
sequences of such ranges that report their overlaps, gaps and extent.

Basic usage::

    from baseunits.intervals import Interval, IntervalSeq

    seq = IntervalSeq()
    seq += Interval.closed(5, 10)
    seq += Interval.over(10, False, 12, True)
    seq += Interval.closed(20, 25)

    list(seq.gaps())          # → [Interval(12, 20)]
    seq.extent()              # → Interval[5, 25]

``None`` stands for "no limit" on either side::

    Interval.under(18)        # (-inf, 18)
    Interval.and_more(3)      # [3, +inf)

Public API
----------
Limit, LowerLimit, UpperLimit   Interval edges.
Interval                        Immutable range value.
IntervalSeq                     Sorted, append-only collection of intervals.
LookAheadIterator               Pull iterator with a one-element buffer.
IntervalError                   Base exception for all interval-related errors.
"""

from __future__ import annotations

from baseunits.intervals._exceptions import (
    EmptyExtentError,
    ExhaustedIteratorError,
    IllegalRangeError,
    IntervalError,
)
from baseunits.intervals.interval import Interval
from baseunits.intervals.interval_seq import IntervalSeq
from baseunits.intervals.iterators import LookAheadIterator
from baseunits.intervals.limit import Limit, LowerLimit, UpperLimit

__all__ = [
    "Interval",
    "IntervalSeq",
    "Limit",
    "LowerLimit",
    "UpperLimit",
    "LookAheadIterator",
    "IntervalError",
    "IllegalRangeError",
    "EmptyExtentError",
    "ExhaustedIteratorError",
]
