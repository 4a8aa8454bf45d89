class EthiocalError(Exception):
    """Base error."""


class InvalidMonthError(EthiocalError, ValueError):
    """Raised when a month number is outside the range of its calendar."""

    def __init__(self, calendar: str, month: int):
        self.calendar = calendar
        self.month = month
        super().__init__(f"Invalid {calendar.capitalize()} month: {month}")


class UnknownCalendarError(EthiocalError, KeyError):
    """Raised when a calendar tag has no registered engine."""


class UnknownRuleKindError(EthiocalError, KeyError):
    """Raised when a dynamic highlight rule names an unregistered kind."""
