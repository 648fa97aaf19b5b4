"""vectorized conversions between day numbers and calendar dates"""
import warnings

import numpy as np

from ._calendars import (GREGORIAN, GREGORIAN_START_DAY, JULIAN,
                         JULIAN_START_DAY, PROLEPTIC_JULIAN, _spm_common_array,
                         _spm_leap_array, is_leap, last_day_of_year,
                         year_from_day)
from ._dates import _DAY_MAX, _DAY_MIN, CalendarDate
from ._errors import AstrocalWarning, InvalidCalendarDate

__all__ = ['day_to_ymd', 'ymd_to_day', 'num2date', 'date2num']


def day_to_ymd(days):
    """
Compute year, month, day arrays from J2000 day numbers.

**`days`**: integer (or array of integers) of day numbers.

returns three int64 arrays with the shape of `days`. The calendar (proleptic
julian, julian or gregorian) is selected per element.
    """
    days = _as_day_array(days)
    gregorian = days >= GREGORIAN_START_DAY
    proleptic = days < JULIAN_START_DAY
    year = np.where(gregorian, year_from_day(days, GREGORIAN),
                    np.where(proleptic, year_from_day(days, PROLEPTIC_JULIAN),
                             year_from_day(days, JULIAN)))
    doy = days - _last_day_of_previous_year(year, gregorian, proleptic)
    leap = np.where(gregorian, is_leap(year, GREGORIAN), is_leap(year, JULIAN))
    month = np.where(doy < 32, 1, (10 * doy + np.where(leap, 313, 323)) // 306)
    day = doy - np.where(leap, _spm_leap_array[month], _spm_common_array[month])
    return year, month, day


def ymd_to_day(year, month, day):
    """
Compute J2000 day numbers from year, month, day arrays (broadcast against
each other).

Raises InvalidCalendarDate, naming the first offending triple, if any
triple does not exist.
    """
    year, month, day = np.broadcast_arrays(np.asarray(year, dtype=np.int64),
                                           np.asarray(month, dtype=np.int64),
                                           np.asarray(day, dtype=np.int64))
    bad_month = (month < 1) | (month > 12)
    # placeholder month so that the tables can be indexed
    safe_month = np.where(bad_month, 1, month)
    gregorian = (year > 1582) | ((year == 1582) &
                                 ((safe_month > 10) |
                                  ((safe_month == 10) & (day >= 5))))
    proleptic = year < 1
    leap = np.where(gregorian, is_leap(year, GREGORIAN), is_leap(year, JULIAN))
    days = (_last_day_of_previous_year(year, gregorian, proleptic) + day +
            np.where(leap, _spm_leap_array[safe_month],
                     _spm_common_array[safe_month]))
    # invalid triples do not map back to themselves
    check_year, check_month, check_day = day_to_ymd(days)
    invalid = (bad_month | (check_year != year) | (check_month != month) |
               (check_day != day))
    if invalid.any():
        i = np.flatnonzero(invalid)[0]
        msg = 'date %04d-%02d-%02d does not exist' %\
        (year.ravel()[i], month.ravel()[i], day.ravel()[i])
        raise InvalidCalendarDate(msg)
    return days


def num2date(days, epoch=None):
    """
Return CalendarDate instances given day numbers.

**`days`**: integer (or array of integers) of day numbers elapsed since
`epoch`.

**`epoch`**: reference CalendarDate, defaults to the J2000 epoch.

returns a CalendarDate instance, or an object array of them with the
shape of `days`.
    """
    days = _as_day_array(days)
    if epoch is not None:
        days = days + epoch.j2000_day
        _check_range(days)
    year, month, day = day_to_ymd(days)
    return _make_date(year, month, day, days)


def date2num(dates, epoch=None):
    """
Return day numbers given CalendarDate instances.

**`dates`**: a CalendarDate instance, or a sequence or array of them.

**`epoch`**: reference CalendarDate, defaults to the J2000 epoch.

returns an integer, or an int64 array with the shape of `dates`, of days
elapsed since `epoch`.
    """
    offset = 0 if epoch is None else epoch.j2000_day
    if isinstance(dates, CalendarDate):
        return dates.j2000_day - offset
    dates = np.asarray(dates, dtype=object)
    days = _j2000_day(dates)
    if isinstance(days, np.ndarray):
        days = days.astype(np.int64)
    return days - offset


def _as_day_array(days):
    days = np.asarray(days)
    if days.size and not np.issubdtype(days.dtype, np.integer):
        raise TypeError('day numbers must be integers, got %s' % days.dtype)
    days = days.astype(np.int64)
    _check_range(days)
    return days


def _check_range(days):
    if np.any((days < _DAY_MIN) | (days > _DAY_MAX)):
        msg = ('day numbers outside the range of 32 bits signed integers, '
               'the dates cannot be represented by all consumers')
        warnings.warn(msg, category=AstrocalWarning, stacklevel=3)


def _last_day_of_previous_year(year, gregorian, proleptic):
    return np.where(gregorian, last_day_of_year(year - 1, GREGORIAN),
                    np.where(proleptic,
                             last_day_of_year(year - 1, PROLEPTIC_JULIAN),
                             last_day_of_year(year - 1, JULIAN)))


def _date_from_fields(year, month, day, j2000_day):
    return CalendarDate._from_fields(int(year), int(month), int(day),
                                     int(j2000_day))


def _day_of(date):
    if not isinstance(date, CalendarDate):
        raise TypeError('expected CalendarDate instances, got %r' % (date,))
    return date.j2000_day


_make_date = np.frompyfunc(_date_from_fields, 4, 1)
_j2000_day = np.frompyfunc(_day_of, 1, 1)
