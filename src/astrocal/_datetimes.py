import math
import numbers

from ._dates import JULIAN_EPOCH, CalendarDate
from ._times import H12, SECONDS_PER_DAY, TimeOfDay


class DateTimeValue(object):
    """
A date and a time of day.

**`date`**: a CalendarDate instance.

**`time`**: a TimeOfDay instance.

Instances are immutable and ordered by date, then by time within the UTC
day when the dates are equal. Adding or subtracting a number of seconds
gives a new instance, subtracting two instances gives the offset between
them in seconds (see offset_from).
    """
    __slots__ = ('_date', '_time')

    def __init__(self, date, time):
        if not isinstance(date, CalendarDate):
            raise TypeError('date must be a CalendarDate, got %r' % (date,))
        if not isinstance(time, TimeOfDay):
            raise TypeError('time must be a TimeOfDay, got %r' % (time,))
        self._date = date
        self._time = time

    @classmethod
    def from_components(cls, year, month, day, hour=0, minute=0, second=0.0,
                        utc_offset_minutes=0):
        """Build an instance from raw year, month, day, hour, minute, second
        values."""
        return cls(CalendarDate(year, month, day),
                   TimeOfDay(hour, minute, second, utc_offset_minutes))

    @classmethod
    def from_offset(cls, reference, offset):
        """
Build an instance `offset` seconds after `reference` (before if negative).

The UTC offset of the reference time is kept. A NaN or infinite result
keeps the reference date and hour, minute with a NaN second.
        """
        day = reference.date.j2000_day
        seconds = reference.time.seconds_in_local_day + offset
        if not math.isfinite(seconds):
            # nan second, the day cannot be shifted
            return cls(reference.date,
                       TimeOfDay._new(reference.time.hour,
                                      reference.time.minute, math.nan,
                                      reference.time.utc_offset_minutes))

        # fix range
        day_shift = int(math.floor(seconds / SECONDS_PER_DAY))
        seconds -= SECONDS_PER_DAY * day_shift
        day += day_shift
        if seconds >= SECONDS_PER_DAY:
            # rounded up from just below the end of the day, no leap second
            day += 1
            seconds = 0.0
        time = TimeOfDay.from_second_in_day(seconds)

        return cls(CalendarDate.from_day_count(day),
                   TimeOfDay(time.hour, time.minute, time.second,
                             reference.time.utc_offset_minutes))

    @property
    def date(self):
        return self._date

    @property
    def time(self):
        return self._time

    def offset_from(self, other):
        """Number of seconds elapsed from `other` to this instance, taking
        the UTC offsets into account."""
        date_offset = self._date.j2000_day - other._date.j2000_day
        time_offset = (self._time.seconds_in_utc_day -
                       other._time.seconds_in_utc_day)
        return SECONDS_PER_DAY * date_offset + time_offset

    def __add__(self, other):
        if isinstance(other, numbers.Real):
            return self.from_offset(self, other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, DateTimeValue):
            return self.offset_from(other)
        if isinstance(other, numbers.Real):
            return self.from_offset(self, -other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        if self._date == other._date:
            return self._time < other._time
        return self._date < other._date

    def __le__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        if self._date == other._date:
            return self._time <= other._time
        return self._date < other._date

    def __gt__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        if self._date == other._date:
            return self._time > other._time
        return self._date > other._date

    def __ge__(self, other):
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        if self._date == other._date:
            return self._time >= other._time
        return self._date > other._date

    def __hash__(self):
        return (hash(self._date) << 16) ^ hash(self._time)

    def __reduce__(self):
        """special method that allows instance to be pickled"""
        return (self.__class__, (self._date, self._time))

    def __repr__(self):
        return 'astrocal.%s(%r, %r)' %\
        (self.__class__.__name__, self._date, self._time)


# julian epoch at noon, the origin of julian days
JULIAN_EPOCH_DATETIME = DateTimeValue(JULIAN_EPOCH, H12)
