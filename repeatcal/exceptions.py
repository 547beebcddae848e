"""Exceptions for repeatcal library."""


class CalendarError(Exception):
    """Base exception for all repeatcal errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing a date or time string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the underlying exception message,
    useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class RecurrenceError(CalendarError):
    """Exception raised when evaluating a recurrence rule.

    Recurrence rules are evaluated eagerly into a list of dates, so a
    rule that can't be evaluated is always a problem with the input rather
    than a transient condition.
    """


class InvalidIntervalError(RecurrenceError):
    """Exception raised when a recurrence interval is less than one."""


class UnboundedExpansionError(RecurrenceError):
    """Exception raised when expanding a recurrence rule without an end condition."""


class StoreError(CalendarError):
    """Exception thrown by a Store."""


class EventStoreError(StoreError):
    """Exception thrown by the EventStore."""
