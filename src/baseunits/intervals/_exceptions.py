class IntervalError(Exception):
    """Base class for all interval-related errors."""


class IllegalRangeError(IntervalError, ValueError):
    """Raised when an interval's lower edge lies past its upper edge."""


class EmptyExtentError(IntervalError, ValueError):
    """Raised when the extent of an empty IntervalSeq is requested."""


class ExhaustedIteratorError(IntervalError, StopIteration):
    """Raised when an iterator is advanced past its last element."""
