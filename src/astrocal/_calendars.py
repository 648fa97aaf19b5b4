# Closed-form day number arithmetic for the astronomical calendar convention:
# proleptic julian calendar up to 0000-12-31 (year zero exists), julian
# calendar from 0001-01-01 to 1582-10-04 and gregorian calendar from
# 1582-10-15 (10 days are missing in 1582).
#
# Day numbers are counted from the J2000 reference day (2000-01-01 is day 0).
# The year functions accept python integers or numpy integer arrays.

import numpy as np

PROLEPTIC_JULIAN = 'proleptic_julian'
JULIAN = 'julian'
GREGORIAN = 'gregorian'
_calendars = [PROLEPTIC_JULIAN, JULIAN, GREGORIAN]

# first day of the gregorian calendar (1582-10-15)
GREGORIAN_START_DAY = -152384
# first day of the julian calendar (0001-01-01)
JULIAN_START_DAY = -730121
# modified julian day of the J2000 reference day
MJD_TO_J2000 = 51544

# Sum of the days of all previous months, indexed by month (entry 0 unused).
_spm_leap   = (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)
_spm_common = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_spm_leap_array = np.array(_spm_leap, dtype=np.int64)
_spm_common_array = np.array(_spm_common, dtype=np.int64)

# public functions.

def is_leap(year, calendar):
    """check if a year is a leap year in the given calendar"""
    calendar = _check_calendar(calendar)
    if calendar == GREGORIAN:
        return (year % 4 == 0) & ((year % 400 == 0) | (year % 100 != 0))
    return year % 4 == 0

def year_from_day(j2000_day, calendar):
    """Get the year number containing a day number.

    Only meaningful when the day number belongs to the calendar, see
    calendar_for_day."""
    calendar = _check_calendar(calendar)
    if calendar == PROLEPTIC_JULIAN:
        return -_tdiv(-4 * j2000_day - 2920488, 1461)
    elif calendar == JULIAN:
        return _tdiv(4 * j2000_day + 2921948, 1461)
    # the estimate is one unit too high for 240 days of
    # the 400 years gregorian cycle (about 0.16%)
    year = _tdiv(400 * j2000_day + 292194288, 146097)
    return year - (j2000_day <= last_day_of_year(year - 1, GREGORIAN))

def last_day_of_year(year, calendar):
    """Get the day number of new year's eve (december 31st) of a year."""
    calendar = _check_calendar(calendar)
    if calendar == PROLEPTIC_JULIAN:
        return 365 * year + _tdiv(year + 1, 4) - 730123
    elif calendar == JULIAN:
        return 365 * year + _tdiv(year, 4) - 730122
    return (365 * year + _tdiv(year, 4) - _tdiv(year, 100) +
            _tdiv(year, 400) - 730120)

def month_from_day_in_year(day_in_year, leap):
    """month number (1-12) for a day number within year (1-366)"""
    if day_in_year < 32:
        return 1
    if leap:
        return (10 * day_in_year + 313) // 306
    return (10 * day_in_year + 323) // 306

def day_from_day_in_year(day_in_year, month, leap):
    spm = _spm_leap if leap else _spm_common
    return day_in_year - spm[month]

def day_in_year(month, day, leap):
    spm = _spm_leap if leap else _spm_common
    return day + spm[month]

def calendar_for_day(j2000_day):
    """calendar that applies to a day number"""
    if j2000_day < GREGORIAN_START_DAY:
        if j2000_day < JULIAN_START_DAY:
            return PROLEPTIC_JULIAN
        return JULIAN
    return GREGORIAN

def calendar_for_date(year, month, day):
    """calendar that applies to a year, month, day triple.

    Triples inside the 1582 gap are attributed to the gregorian calendar,
    they do not map back to themselves."""
    if year < 1583:
        if year < 1:
            return PROLEPTIC_JULIAN
        if year < 1582 or month < 10 or (month < 11 and day < 5):
            return JULIAN
    return GREGORIAN

def ymd_to_day(year, month, day):
    """Compute the J2000 day number of a year, month, day triple.

    No validation is done here, invalid triples give a day number that
    does not convert back to the same triple."""
    calendar = calendar_for_date(year, month, day)
    leap = is_leap(year, calendar)
    return last_day_of_year(year - 1, calendar) + day_in_year(month, day, leap)

def day_to_ymd(j2000_day):
    """Compute year, month, day from a J2000 day number."""
    calendar = calendar_for_day(j2000_day)
    year = year_from_day(j2000_day, calendar)
    doy = j2000_day - last_day_of_year(year - 1, calendar)
    leap = is_leap(year, calendar)
    month = month_from_day_in_year(doy, leap)
    return year, month, day_from_day_in_year(doy, month, leap)

# private functions

def _check_calendar(calendar):
    """validate calendar names"""
    if calendar not in _calendars:
        raise ValueError('unsupported calendar')
    return calendar

def _tdiv(a, b):
    """integer division truncated toward zero, for python ints and numpy
    integer arrays (the day number formulas rely on it for negative years)"""
    q = a // b
    return q + ((q < 0) & (q * b != a))
