from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Specification(Generic[T]):
    """
    Composable boolean predicate over candidates of type ``T``.

    The variant set is closed: :class:`Predicate`, :class:`AndSpecification`,
    :class:`OrSpecification` and :class:`NotSpecification`.  Composition never
    mutates an operand, it builds a new node.  ``&``, ``|`` and ``~`` are
    aliases of :meth:`and_`, :meth:`or_` and :meth:`not_`.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        return _evaluate(self, candidate)

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def and_(self, other: Specification[T]) -> Specification[T]:
        return AndSpecification(_operands(self, AndSpecification) + _operands(other, AndSpecification))

    def or_(self, other: Specification[T]) -> Specification[T]:
        return OrSpecification(_operands(self, OrSpecification) + _operands(other, OrSpecification))

    def not_(self) -> Specification[T]:
        return NotSpecification(self)

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return self.and_(other)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        return self.or_(other)

    def __invert__(self) -> Specification[T]:
        return self.not_()


class Predicate(Specification[T]):
    """Leaf specification wrapping a plain ``candidate -> bool`` callable."""

    def __init__(self, test: Callable[[T], bool], name: str = "predicate") -> None:
        self.test = test
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


@dataclass(frozen=True)
class AndSpecification(Specification[T]):
    operands: tuple[Specification[T], ...]

    def __repr__(self) -> str:
        return "(" + " & ".join(repr(o) for o in self.operands) + ")"


@dataclass(frozen=True)
class OrSpecification(Specification[T]):
    operands: tuple[Specification[T], ...]

    def __repr__(self) -> str:
        return "(" + " | ".join(repr(o) for o in self.operands) + ")"


@dataclass(frozen=True)
class NotSpecification(Specification[T]):
    operand: Specification[T]

    def __repr__(self) -> str:
        return f"~{self.operand!r}"


def _operands(spec: Specification[Any], kind: type) -> tuple[Specification[Any], ...]:
    # Same-kind nodes are flattened so accumulations stay shallow.
    if type(spec) is kind:
        return spec.operands  # type: ignore[attr-defined]
    return (spec,)


def _evaluate(spec: Specification[T], candidate: T) -> bool:
    if isinstance(spec, Predicate):
        return bool(spec.test(candidate))
    if isinstance(spec, AndSpecification):
        return all(_evaluate(o, candidate) for o in spec.operands)
    if isinstance(spec, OrSpecification):
        return any(_evaluate(o, candidate) for o in spec.operands)
    if isinstance(spec, NotSpecification):
        return not _evaluate(spec.operand, candidate)
    raise TypeError(f"Unsupported specification type: {type(spec).__name__}")


def never() -> Predicate[Any]:
    """Specification satisfied by nothing; the identity of ``or_``."""
    return Predicate(lambda _: False, "never")
