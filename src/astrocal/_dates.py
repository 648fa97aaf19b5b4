import numbers
import operator
import warnings

from ._calendars import (MJD_TO_J2000, calendar_for_day, day_to_ymd, is_leap,
                         ymd_to_day)
from ._errors import AstrocalWarning, InvalidCalendarDate, InvalidWeekDate

# range of day numbers representable as 32 bits signed integers
_DAY_MIN = -2**31
_DAY_MAX = 2**31 - 1


class CalendarDate(object):
    """
The base class implementing a calendar date, as a (year, month, day) triple.

Dates follow the astronomical convention used by scientific timekeeping:
there is a year zero, the proleptic julian calendar applies up to
0000-12-31, the julian calendar from 0001-01-01 to 1582-10-04 and the
gregorian calendar from 1582-10-15 onward. The ten days 1582-10-05 to
1582-10-14 do not exist.

The equivalent integer representation is the day number relative to the
J2000 reference day (2000-01-01 is day 0), available as `j2000_day`.

Instances are immutable. Equality compares the (year, month, day) triple,
ordering compares day numbers (month and day numbering shifts across the
1582 reform, so the triples themselves cannot be compared
lexicographically).

Arithmetic: adding or subtracting an integer number of days gives a new
date, subtracting two dates gives the integer number of days between them.

Raises InvalidCalendarDate if the triple does not exist (month out of
range, February 29th of a common year, dates within the 1582 gap, ...).
    """
    __slots__ = ('_year', '_month', '_day', '_j2000_day')

    def __init__(self, year, month, day):
        year = operator.index(year)
        month = operator.index(month)
        day = operator.index(day)
        if month < 1 or month > 12:
            msg = 'month %d does not exist (date %04d-%02d-%02d)' %\
            (month, year, month, day)
            raise InvalidCalendarDate(msg)
        j2000_day = ymd_to_day(year, month, day)
        # invalid triples (29 february on common years, days in the 1582
        # gap, day 0 ...) do not map back to themselves
        if day_to_ymd(j2000_day) != (year, month, day):
            msg = 'date %04d-%02d-%02d does not exist' % (year, month, day)
            raise InvalidCalendarDate(msg)
        _check_day_range(j2000_day)
        self._year = year
        self._month = month
        self._day = day
        self._j2000_day = j2000_day

    @classmethod
    def _from_fields(cls, year, month, day, j2000_day):
        # no validation, the fields must be consistent
        self = cls.__new__(cls)
        self._year = year
        self._month = month
        self._day = day
        self._j2000_day = j2000_day
        return self

    @classmethod
    def _from_j2000_day(cls, j2000_day):
        _check_day_range(j2000_day)
        return cls._from_fields(*day_to_ymd(j2000_day), j2000_day=j2000_day)

    @classmethod
    def from_day_count(cls, offset, epoch=None):
        """
Build a date from a number of days elapsed since an epoch.

**`offset`**: number of days (may be negative).

**`epoch`**: reference date, defaults to the J2000 epoch, in which case
`offset` is the J2000 day number itself.
        """
        offset = operator.index(offset)
        if epoch is not None:
            offset += epoch.j2000_day
        return cls._from_j2000_day(offset)

    @classmethod
    def from_day_of_year(cls, year, day_of_year):
        """Build a date from a year and a day number within this year (1 to
        365, 366 on leap years, 355 in 1582)."""
        year = operator.index(year)
        day_of_year = operator.index(day_of_year)
        date = cls._from_j2000_day(ymd_to_day(year - 1, 12, 31) + day_of_year)
        if date.day_of_year != day_of_year:
            msg = 'day number %d does not exist in year %d' %\
            (day_of_year, year)
            raise InvalidCalendarDate(msg)
        return date

    @classmethod
    def from_week_components(cls, week_year, week, day_of_week):
        """
Build a date from its ISO-8601 week components.

**`week_year`**: week-based year, may differ from the calendar year for
the first and last days of a year.

**`week`**: week number, week 1 being the week containing the first
thursday of `week_year`.

**`day_of_week`**: 1 for Monday to 7 for Sunday.

Raises InvalidWeekDate if the week or the day of week does not exist.
        """
        week_year = operator.index(week_year)
        week = operator.index(week)
        day_of_week = operator.index(day_of_week)
        first_monday = cls.first_week_monday(week_year)
        date = cls._from_j2000_day(first_monday + 7 * week + day_of_week - 8)
        if week != date.calendar_week or day_of_week != date.day_of_week:
            msg = 'week date %d-W%02d-%d does not exist' %\
            (week_year, week, day_of_week)
            raise InvalidWeekDate(msg)
        return date

    @staticmethod
    def first_week_monday(year):
        """J2000 day number of the monday starting ISO week 1 of a year."""
        year_first = ymd_to_day(year, 1, 1)
        offset_to_monday = 4 - (year_first + 2) % 7
        if offset_to_monday > 3:
            offset_to_monday -= 7
        return year_first + offset_to_monday

    @property
    def year(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day(self):
        return self._day

    @property
    def j2000_day(self):
        """number of days since the J2000 reference day (2000-01-01)"""
        return self._j2000_day

    @property
    def mjd(self):
        """modified julian day"""
        return MJD_TO_J2000 + self._j2000_day

    @property
    def calendar(self):
        """calendar the date belongs to ('proleptic_julian', 'julian' or
        'gregorian')"""
        return calendar_for_day(self._j2000_day)

    @property
    def is_leap_year(self):
        return bool(is_leap(self._year, self.calendar))

    @property
    def days_in_month(self):
        if self._month == 12:
            next_first = ymd_to_day(self._year + 1, 1, 1)
        else:
            next_first = ymd_to_day(self._year, self._month + 1, 1)
        return next_first - ymd_to_day(self._year, self._month, 1)

    @property
    def day_of_year(self):
        return self._j2000_day - ymd_to_day(self._year - 1, 12, 31)

    @property
    def day_of_week(self):
        """ISO day of week, 1 for Monday to 7 for Sunday"""
        dow = (self._j2000_day + 6) % 7
        return 7 if dow < 1 else dow

    @property
    def calendar_week(self):
        """ISO-8601 week number.

        The first days of january may belong to the last week of the
        previous year and the last days of december to the first week of
        the next year, see isocalendar for the matching week-based year."""
        first_monday = self.first_week_monday(self._year)
        days_since_monday = self._j2000_day - first_monday
        if days_since_monday < 0:
            # still in a week from previous year
            days_since_monday = (self._j2000_day -
                                 self.first_week_monday(self._year - 1))
        elif days_since_monday > 363:
            # up to three days at end of year may belong to first week
            # of next year
            week_year_length = (self.first_week_monday(self._year + 1) -
                                first_monday)
            if days_since_monday >= week_year_length:
                days_since_monday -= week_year_length
        return 1 + days_since_monday // 7

    def isocalendar(self):
        """return (week_year, week, day_of_week) ISO-8601 components"""
        week = self.calendar_week
        week_year = self._year
        if self._month == 1 and week > 50:
            week_year -= 1
        elif self._month == 12 and week == 1:
            week_year += 1
        return week_year, week, self.day_of_week

    def replace(self, **kwargs):
        """Return a new date with fields replaced (year, month or day)."""
        args = {'year': self._year, 'month': self._month, 'day': self._day}
        for name, value in kwargs.items():
            if name not in args:
                raise TypeError('replace() got an unexpected keyword '
                                'argument %r' % name)
            args[name] = value
        return self.__class__(**args)

    def __add__(self, other):
        if isinstance(other, numbers.Integral):
            return self._from_j2000_day(self._j2000_day + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, CalendarDate):
            return self._j2000_day - other._j2000_day
        if isinstance(other, numbers.Integral):
            return self._from_j2000_day(self._j2000_day - int(other))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year == other._year and self._month == other._month and
                self._day == other._day)

    def __lt__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._j2000_day < other._j2000_day

    def __le__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._j2000_day <= other._j2000_day

    def __gt__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._j2000_day > other._j2000_day

    def __ge__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._j2000_day >= other._j2000_day

    def __hash__(self):
        return (self._year << 16) ^ (self._month << 8) ^ self._day

    def __reduce__(self):
        """special method that allows instance to be pickled"""
        return (self.__class__, (self._year, self._month, self._day))

    def __repr__(self):
        return 'astrocal.%s(%d, %d, %d)' %\
        (self.__class__.__name__, self._year, self._month, self._day)


def _check_day_range(j2000_day):
    if j2000_day < _DAY_MIN or j2000_day > _DAY_MAX:
        msg = ('day number %d is outside the range of 32 bits signed '
               'integers, the date cannot be represented by all consumers'
               % j2000_day)
        warnings.warn(msg, category=AstrocalWarning, stacklevel=3)


JULIAN_EPOCH = CalendarDate(-4712, 1, 1)
MODIFIED_JULIAN_EPOCH = CalendarDate(1858, 11, 17)
FIFTIES_EPOCH = CalendarDate(1950, 1, 1)
CCSDS_EPOCH = CalendarDate(1958, 1, 1)
GALILEO_EPOCH = CalendarDate(1999, 8, 22)
GPS_EPOCH = CalendarDate(1980, 1, 6)
QZSS_EPOCH = CalendarDate(1980, 1, 6)
IRNSS_EPOCH = CalendarDate(1999, 8, 22)
BEIDOU_EPOCH = CalendarDate(2006, 1, 1)
GLONASS_EPOCH = CalendarDate(1996, 1, 1)
J2000_EPOCH = CalendarDate(2000, 1, 1)
UNIX_EPOCH = CalendarDate(1970, 1, 1)
MAX_EPOCH = CalendarDate.from_day_count(_DAY_MAX)
MIN_EPOCH = CalendarDate.from_day_count(_DAY_MIN)
