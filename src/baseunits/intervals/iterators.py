from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from ._exceptions import ExhaustedIteratorError

T = TypeVar("T")

_MISSING = object()


class LookAheadIterator(Generic[T]):
    """
    Pull iterator with an explicit one-element look-ahead buffer.

    Wraps ``source`` and, when ``accept`` is given, yields only the elements
    it accepts.  ``has_next()`` may be called any number of times without
    losing elements.  The source is consumed; callers must not advance it
    directly while this iterator is in use.

    Advancing past the last element raises :class:`ExhaustedIteratorError`,
    which is a ``StopIteration`` so ``for`` loops terminate normally.
    """

    def __init__(
        self,
        source: Iterator[T],
        accept: Optional[Callable[[T], bool]] = None,
    ) -> None:
        self._source = source
        self._accept = accept
        self._buffer: object = _MISSING
        self._exhausted = False

    def _fill(self) -> None:
        while self._buffer is _MISSING and not self._exhausted:
            candidate = next(self._source, _MISSING)
            if candidate is _MISSING:
                self._exhausted = True
            elif self._accept is None or self._accept(candidate):
                self._buffer = candidate

    def has_next(self) -> bool:
        self._fill()
        return self._buffer is not _MISSING

    def __iter__(self) -> LookAheadIterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise ExhaustedIteratorError("Iterator advanced past its last element.")
        result, self._buffer = self._buffer, _MISSING
        return result  # type: ignore[return-value]
