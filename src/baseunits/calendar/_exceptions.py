class CalendarError(Exception):
    """Base class for all calendar-related errors."""


class NegativeCountError(CalendarError, ValueError):
    """Raised when a negative number of business days is requested."""
