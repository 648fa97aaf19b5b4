"""exceptions and warnings raised by astrocal"""

__all__ = ['AstrocalError', 'InvalidCalendarDate', 'InvalidWeekDate',
           'InvalidTimeOfDay', 'InvalidSecondsOfDay', 'AstrocalWarning']


class AstrocalError(ValueError):
    """Base class for invalid values passed to astrocal constructors."""
    pass


class InvalidCalendarDate(AstrocalError):
    """year, month, day (or year, day of year) that do not exist."""
    pass


class InvalidWeekDate(InvalidCalendarDate):
    """ISO week-year, week, day of week that do not exist."""
    pass


class InvalidTimeOfDay(AstrocalError):
    """hour, minute, second out of range."""
    pass


class InvalidSecondsOfDay(InvalidTimeOfDay):
    """seconds in day (or leap second parameters) out of range."""
    pass


class AstrocalWarning(UserWarning):
    pass
