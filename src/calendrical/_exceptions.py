class CalendricalError(Exception):
    """Base exception for all calendrical errors."""


class InvalidDate(CalendricalError, ValueError):
    """Month or day outside the calendar's valid range."""


class InvalidWeekday(CalendricalError, ValueError):
    """Weekday is neither 1..7 nor a recognised weekday name."""


class RolloverMismatch(CalendricalError):
    """
    Date-only conversion between calendars whose days start at different
    times of day. Convert a CalendarDateTime instead.
    """


class ArithmeticDegenerate(CalendricalError, ZeroDivisionError):
    """Zero denominator in exact fraction arithmetic."""
