import math
import numbers
import operator

import numpy as np

from ._calendars import _tdiv
from ._errors import InvalidSecondsOfDay, InvalidTimeOfDay

SECONDS_PER_DAY = 86400
# absolute tolerance on seconds when comparing times for equality
TIME_TOLERANCE = 1e-8


class TimeOfDay(object):
    """
A time within the day, broken up as hour, minute and second, with a fixed
offset from UTC.

**`hour`**: 0 to 23.

**`minute`**: 0 to 59.

**`second`**: 0.0 to 61.0 (excluded). Values from 60.0 only occur during a
leap second.

**`utc_offset_minutes`**: offset between the local time and UTC, as an
integral number of minutes (ISO-8601).

Instances are immutable. Equality compares hour, minute and UTC offset
exactly and second within TIME_TOLERANCE. Ordering compares the seconds
within the UTC day. The hash only uses the whole part of the second, so two
times that compare equal across a whole second boundary (1.999999999995 and
2.0) hash differently.
    """
    __slots__ = ('_hour', '_minute', '_second', '_utc_offset_minutes')

    def __init__(self, hour, minute, second=0.0, utc_offset_minutes=0):
        hour = operator.index(hour)
        minute = operator.index(minute)
        second = float(second)
        if (hour < 0 or hour > 23 or minute < 0 or minute > 59 or
                second < 0.0 or second >= 61.0):
            msg = 'time %02d:%02d:%r does not exist' % (hour, minute, second)
            raise InvalidTimeOfDay(msg)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._utc_offset_minutes = operator.index(utc_offset_minutes)

    @classmethod
    def _new(cls, hour, minute, second, utc_offset_minutes=0):
        # no range check, used for already normalized values
        self = cls.__new__(cls)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._utc_offset_minutes = utc_offset_minutes
        return self

    @classmethod
    def from_second_in_day(cls, second_in_day_a, second_in_day_b=0.0):
        """
Build a UTC time from the second number within the day.

The second number is the sum `second_in_day_a + second_in_day_b`, from 0.0
to 86401.0 (excluded); splitting it in an integer and a fractional part
preserves sub-second accuracy. A non integer `second_in_day_a` is folded
into the fractional part.

A sum of 86400.0 or more is assumed to fall within a positive leap second
at the end of the day. For any other leap second handling, use
from_seconds.
        """
        if not isinstance(second_in_day_a, numbers.Integral):
            second_in_day_a, second_in_day_b = 0, second_in_day_a + second_in_day_b
        if (SECONDS_PER_DAY - second_in_day_a) - second_in_day_b > 0:
            return cls.from_seconds(second_in_day_a, second_in_day_b, 0.0, 60)
        return cls.from_seconds(second_in_day_a - 1, second_in_day_b, 1.0, 61)

    @classmethod
    def from_seconds(cls, second_in_day_a, second_in_day_b, leap,
                     minute_duration, check=True):
        """
Build a UTC time from the second number within the day, with explicit
leap second handling.

Hour and minute are computed from `second_in_day_a + second_in_day_b`
only, `leap` is added to the resulting second of minute.

**`second_in_day_a`**: integer part of the second number.

**`second_in_day_b`**: fractional part of the second number (any carry
above 1.0 is moved to the integer part).

**`leap`**: magnitude of the leap second if this instant is within a leap
second, 0.0 otherwise.

**`minute_duration`**: number of seconds in the current minute, normally
60.

**`check`**: if True (default) raise InvalidSecondsOfDay when the
preconditions below do not hold, else accept the values as they are.

    0 <= second_in_day_a + second_in_day_b < 86400
    0 <= leap <= minute_duration - 60    if minute_duration >= 60
    0 >= leap >= minute_duration - 60    if minute_duration < 60

A second of minute that rounds to `minute_duration` or more is set to the
largest float below `minute_duration`. If `second_in_day_b` or `leap` is
NaN, hour and minute are computed from `second_in_day_a` alone and the
second is NaN.
        """
        second_in_day_a = operator.index(second_in_day_a)
        minute_duration = operator.index(minute_duration)
        second_in_day_b = float(second_in_day_b)
        leap = float(leap)
        invalid = math.isnan(second_in_day_b) or math.isnan(leap)

        # split the numbers as a whole number of seconds
        # and a fractional part between 0.0 (included) and 1.0 (excluded)
        carry = 0 if invalid else math.floor(second_in_day_b)
        whole_seconds = second_in_day_a + carry
        fractional = second_in_day_b - carry

        if check and not invalid:
            if whole_seconds < 0 or whole_seconds >= SECONDS_PER_DAY:
                msg = 'second number %r out of range [0, %d)' %\
                (second_in_day_a + second_in_day_b, SECONDS_PER_DAY)
                raise InvalidSecondsOfDay(msg)
            max_extra_seconds = minute_duration - 60
            if (leap * max_extra_seconds < 0 or
                    abs(leap) > abs(max_extra_seconds)):
                msg = 'leap %r out of range for a %d seconds minute' %\
                (leap, minute_duration)
                raise InvalidSecondsOfDay(msg)

        hour = _tdiv(whole_seconds, 3600)
        whole_seconds -= 3600 * hour
        minute = _tdiv(whole_seconds, 60)
        whole_seconds -= 60 * minute

        naive_second = whole_seconds + (leap + fractional)
        if check and naive_second < 0:
            msg = 'second %r out of range [0, %d)' %\
            (naive_second, minute_duration)
            raise InvalidSecondsOfDay(msg)
        # the naive second may round up to minute_duration even when the
        # preconditions hold, keep a valid time at the cost of 1 ulp
        if naive_second < minute_duration or math.isnan(naive_second):
            second = naive_second
        else:
            second = float(np.nextafter(float(minute_duration), -np.inf))
        return cls._new(hour, minute, second)

    @property
    def hour(self):
        return self._hour

    @property
    def minute(self):
        return self._minute

    @property
    def second(self):
        return self._second

    @property
    def utc_offset_minutes(self):
        return self._utc_offset_minutes

    @property
    def seconds_in_local_day(self):
        """second number within the local day, ignoring the UTC offset"""
        return self._second + 60.0 * self._minute + 3600.0 * self._hour

    @property
    def seconds_in_utc_day(self):
        """second number within the UTC day, applying the UTC offset (may be
        negative or exceed 86400)"""
        return (self._second + 60.0 * (self._minute - self._utc_offset_minutes) +
                3600.0 * self._hour)

    def replace(self, **kwargs):
        """Return a new time with fields replaced (hour, minute, second or
        utc_offset_minutes)."""
        args = {'hour': self._hour, 'minute': self._minute,
                'second': self._second,
                'utc_offset_minutes': self._utc_offset_minutes}
        for name, value in kwargs.items():
            if name not in args:
                raise TypeError('replace() got an unexpected keyword '
                                'argument %r' % name)
            args[name] = value
        return self.__class__(**args)

    def __eq__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return (self._hour == other._hour and self._minute == other._minute and
                abs(self._second - other._second) < TIME_TOLERANCE and
                self._utc_offset_minutes == other._utc_offset_minutes)

    def __lt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.seconds_in_utc_day < other.seconds_in_utc_day

    def __le__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.seconds_in_utc_day <= other.seconds_in_utc_day

    def __gt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.seconds_in_utc_day > other.seconds_in_utc_day

    def __ge__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.seconds_in_utc_day >= other.seconds_in_utc_day

    def __hash__(self):
        bits = int(self._second) if math.isfinite(self._second) else 0
        return ((self._hour << 16) ^
                ((self._minute - self._utc_offset_minutes) << 8)) ^ bits

    def __reduce__(self):
        """special method that allows instance to be pickled"""
        return (self.__class__._new, (self._hour, self._minute, self._second,
                                      self._utc_offset_minutes))

    def __repr__(self):
        return 'astrocal.%s(%d, %d, %r, utc_offset_minutes=%d)' %\
        (self.__class__.__name__, self._hour, self._minute, self._second,
         self._utc_offset_minutes)


H00 = TimeOfDay(0, 0, 0.0)
H12 = TimeOfDay(12, 0, 0.0)
