"""
baseunits.specification
~~~~~~~~~~~~~~~~~~~~~~~

Composable boolean predicates (the Specification pattern).

Basic usage::

    from baseunits.specification import Predicate, never

    even = Predicate(lambda n: n % 2 == 0, "even")
    big = Predicate(lambda n: n > 100, "big")

    (even & ~big).is_satisfied_by(42)    # → True
    never().or_(even).is_satisfied_by(3)  # → False

Public API
----------
Specification       Base class; and_/or_/not_ and the &, |, ~ operators.
Predicate           Leaf wrapping a callable.
AndSpecification    n-ary conjunction.
OrSpecification     n-ary disjunction.
NotSpecification    Negation.
never               Factory for the always-false specification.
"""

from __future__ import annotations

from baseunits.specification.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Predicate,
    Specification,
    never,
)

__all__ = [
    "Specification",
    "Predicate",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "never",
]
