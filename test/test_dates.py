import astrocal
from astrocal import (CalendarDate, InvalidCalendarDate, InvalidWeekDate,
                      AstrocalWarning, is_leap)
import operator
import pickle
import unittest
import warnings

import pytest

# test calendar date <--> day number conversions.


class ReformTestCase(unittest.TestCase):
    """julian/gregorian transition and year zero"""

    def setUp(self):
        # last day of the julian calendar
        self.last_julian = CalendarDate(1582, 10, 4)
        # first day of the gregorian calendar
        self.first_gregorian = CalendarDate(1582, 10, 15)
        self.year_zero_end = CalendarDate(0, 12, 31)
        self.year_one_start = CalendarDate(1, 1, 1)

    def test_continuity(self):
        self.assertEqual(self.last_julian.j2000_day, -152385)
        self.assertEqual(self.first_gregorian.j2000_day, -152384)
        self.assertEqual(self.last_julian + 1, self.first_gregorian)
        self.assertEqual(self.first_gregorian - 1, self.last_julian)
        self.assertEqual(self.first_gregorian - self.last_julian, 1)
        self.assertEqual(CalendarDate.from_day_count(-152385), self.last_julian)
        self.assertEqual(CalendarDate.from_day_count(-152384),
                         self.first_gregorian)

    def test_week_days(self):
        # thursday 4th was followed by friday 15th
        self.assertEqual(self.last_julian.day_of_week, 4)
        self.assertEqual(self.first_gregorian.day_of_week, 5)

    def test_calendars(self):
        self.assertEqual(self.last_julian.calendar, 'julian')
        self.assertEqual(self.first_gregorian.calendar, 'gregorian')
        self.assertEqual(self.year_zero_end.calendar, 'proleptic_julian')
        self.assertEqual(self.year_one_start.calendar, 'julian')

    def test_year_zero(self):
        self.assertEqual(self.year_zero_end.j2000_day, -730122)
        self.assertEqual(self.year_one_start.j2000_day, -730121)
        self.assertEqual(self.year_zero_end + 1, self.year_one_start)
        # year 0 is a leap year, year -1 is not
        CalendarDate(0, 2, 29)
        CalendarDate(-4, 2, 29)
        self.assertRaises(InvalidCalendarDate, CalendarDate, -1, 2, 29)
        self.assertTrue(CalendarDate(0, 6, 1).is_leap_year)
        self.assertFalse(CalendarDate(-1, 6, 1).is_leap_year)

    def test_1582_lengths(self):
        self.assertEqual(CalendarDate(1582, 12, 31).day_of_year, 355)
        self.assertEqual(self.last_julian.day_of_year, 277)
        self.assertEqual(self.first_gregorian.day_of_year, 278)
        self.assertEqual(CalendarDate(1582, 10, 1).days_in_month, 21)
        self.assertEqual(CalendarDate(1582, 9, 1).days_in_month, 30)


def test_leap_year_rules():
    assert is_leap(1900, 'julian')
    assert not is_leap(1900, 'gregorian')
    assert is_leap(2000, 'julian')
    assert is_leap(2000, 'gregorian')
    assert is_leap(0, 'proleptic_julian')
    with pytest.raises(ValueError):
        is_leap(2000, 'noleap')
    # julian rule before the reform, gregorian rule after it
    CalendarDate(1500, 2, 29)
    CalendarDate(2000, 2, 29)
    for year in (1700, 1800, 1900, 2100):
        with pytest.raises(InvalidCalendarDate):
            CalendarDate(year, 2, 29)


@pytest.mark.parametrize(
    'date_args',
    [(1582, 10, 5), (1582, 10, 14)], ids=['lower-bound', 'upper-bound'])
def test_invalid_julian_gregorian_mixed_dates(date_args):
    with pytest.raises(InvalidCalendarDate):
        CalendarDate(*date_args)


_INVALID_DATES = {
    'month-zero': (2000, 0, 1),
    'month-13': (2000, 13, 1),
    'day-zero': (2000, 1, 0),
    'day-32': (2000, 1, 32),
    'april-31': (2000, 4, 31),
    'february-30-leap': (2000, 2, 30),
    'february-29-common': (2001, 2, 29),
    'negative-day': (2000, 3, -1),
}


@pytest.mark.parametrize('date_args', list(_INVALID_DATES.values()),
                         ids=list(_INVALID_DATES.keys()))
def test_invalid_dates(date_args):
    with pytest.raises(InvalidCalendarDate):
        CalendarDate(*date_args)
    # also a ValueError, like other invalid dates in the python ecosystem
    with pytest.raises(ValueError):
        CalendarDate(*date_args)


def test_non_integer_fields():
    with pytest.raises(TypeError):
        CalendarDate(2000.5, 1, 1)


@pytest.mark.parametrize('year, expected', [
    (-5, 365), (-4, 366), (0, 366), (1, 365), (4, 366), (1500, 366),
    (1582, 355), (1600, 366), (1700, 365), (1900, 365), (2000, 366),
    (2023, 365), (2024, 366)])
def test_triple_roundtrip(year, expected):
    count = 0
    previous = None
    for month in range(1, 13):
        for day in range(1, 32):
            try:
                date = CalendarDate(year, month, day)
            except InvalidCalendarDate:
                continue
            count += 1
            assert CalendarDate.from_day_count(date.j2000_day) == date
            assert date.day_of_year == count
            if previous is not None:
                assert date.j2000_day == previous.j2000_day + 1
            previous = date
    assert count == expected


def test_day_count_roundtrip():
    days = (list(range(-800000, 800000, 97)) +
            list(range(-730200, -730000)) +
            list(range(-152500, -152300)) +
            [-2**31, 2**31 - 1])
    for j2000_day in days:
        date = CalendarDate.from_day_count(j2000_day)
        assert date.j2000_day == j2000_day
        assert CalendarDate(date.year, date.month, date.day) == date


def test_ordering_consistency():
    dates = [CalendarDate.from_day_count(d)
             for d in range(-152400, -152370)]
    for a in dates:
        for b in dates:
            assert (a < b) == (a.j2000_day < b.j2000_day)
            assert (a <= b) == (a.j2000_day <= b.j2000_day)
            assert (a > b) == (a.j2000_day > b.j2000_day)
            assert (a == b) == (a.j2000_day == b.j2000_day)
    # month/day numbering is not monotonic across the reform
    assert CalendarDate(1582, 10, 4) < CalendarDate(1582, 10, 15)
    assert sorted(reversed(dates)) == dates


def test_richcmp_errors():
    date = CalendarDate(2000, 1, 1)
    assert date != (2000, 1, 1)
    assert not date == 0
    for op in (operator.lt, operator.le, operator.gt, operator.ge):
        with pytest.raises(TypeError):
            op(date, 0)


def test_arithmetic():
    date = CalendarDate(2000, 2, 28)
    assert date + 1 == CalendarDate(2000, 2, 29)
    assert 2 + date == CalendarDate(2000, 3, 1)
    assert date - 59 == CalendarDate(1999, 12, 31)
    assert CalendarDate(2001, 1, 1) - CalendarDate(2000, 1, 1) == 366
    assert CalendarDate(1, 1, 1) - 1 == CalendarDate(0, 12, 31)
    with pytest.raises(TypeError):
        date + 1.5
    with pytest.raises(TypeError):
        date - 'x'


def test_day_of_year():
    assert CalendarDate.from_day_of_year(2000, 1) == CalendarDate(2000, 1, 1)
    assert CalendarDate.from_day_of_year(2000, 366) == CalendarDate(2000, 12, 31)
    assert CalendarDate.from_day_of_year(2001, 60) == CalendarDate(2001, 3, 1)
    assert CalendarDate.from_day_of_year(1582, 277) == CalendarDate(1582, 10, 4)
    assert CalendarDate.from_day_of_year(1582, 278) == CalendarDate(1582, 10, 15)
    assert CalendarDate.from_day_of_year(1582, 355) == CalendarDate(1582, 12, 31)
    for year, day_of_year in ((2001, 366), (1582, 356), (2000, 0), (2000, -1)):
        with pytest.raises(InvalidCalendarDate):
            CalendarDate.from_day_of_year(year, day_of_year)


def test_epochs():
    assert astrocal.J2000_EPOCH.j2000_day == 0
    assert astrocal.MODIFIED_JULIAN_EPOCH.mjd == 0
    assert astrocal.MODIFIED_JULIAN_EPOCH == CalendarDate(1858, 11, 17)
    assert astrocal.JULIAN_EPOCH.j2000_day == -2451545
    assert astrocal.UNIX_EPOCH.j2000_day == -10957
    assert astrocal.GPS_EPOCH.mjd == 44244
    assert astrocal.QZSS_EPOCH == astrocal.GPS_EPOCH
    assert astrocal.GALILEO_EPOCH.mjd == 51412
    assert astrocal.IRNSS_EPOCH == astrocal.GALILEO_EPOCH
    assert astrocal.CCSDS_EPOCH.mjd == 36204
    assert astrocal.FIFTIES_EPOCH.mjd == 33282
    assert astrocal.GLONASS_EPOCH.mjd == 50083
    assert astrocal.BEIDOU_EPOCH.mjd == 53736
    assert astrocal.MAX_EPOCH.j2000_day == 2**31 - 1
    assert astrocal.MIN_EPOCH.j2000_day == -2**31
    assert astrocal.GPS_EPOCH.day_of_week == 7
    # day count relative to an epoch
    assert (CalendarDate.from_day_count(10957, epoch=astrocal.UNIX_EPOCH) ==
            astrocal.J2000_EPOCH)
    assert (CalendarDate.from_day_count(0, epoch=astrocal.J2000_EPOCH) ==
            astrocal.J2000_EPOCH)


def test_out_of_range_warning():
    with pytest.warns(AstrocalWarning):
        date = CalendarDate.from_day_count(2**31)
    assert date.j2000_day == 2**31
    with warnings.catch_warnings():
        warnings.simplefilter('error', category=AstrocalWarning)
        CalendarDate.from_day_count(2**31 - 1)
        CalendarDate.from_day_count(-2**31)


class WeekTestCase(unittest.TestCase):
    """ISO-8601 week dates"""

    def test_examples(self):
        self.assertEqual(CalendarDate(1995, 1, 1).isocalendar(), (1994, 52, 7))
        self.assertEqual(CalendarDate(1996, 12, 31).isocalendar(), (1997, 1, 2))
        self.assertEqual(CalendarDate(2004, 12, 31).isocalendar(), (2004, 53, 5))
        self.assertEqual(CalendarDate(2021, 1, 1).isocalendar(), (2020, 53, 5))
        self.assertEqual(CalendarDate(2000, 1, 1).calendar_week, 52)
        self.assertEqual(CalendarDate(2000, 1, 3).calendar_week, 1)

    def test_from_week_components(self):
        self.assertEqual(CalendarDate.from_week_components(1994, 52, 7),
                         CalendarDate(1995, 1, 1))
        self.assertEqual(CalendarDate.from_week_components(1997, 1, 2),
                         CalendarDate(1996, 12, 31))
        self.assertEqual(CalendarDate.from_week_components(2020, 53, 5),
                         CalendarDate(2021, 1, 1))

    def test_invalid_week_dates(self):
        for args in ((2021, 53, 1), (2020, 0, 1), (2020, 54, 1),
                     (2020, 10, 0), (2020, 10, 8)):
            self.assertRaises(InvalidWeekDate,
                              CalendarDate.from_week_components, *args)
        # invalid week dates are invalid calendar dates
        self.assertRaises(InvalidCalendarDate,
                          CalendarDate.from_week_components, 2021, 53, 1)

    def test_roundtrip(self):
        # around year zero, the 1582 reform and present days
        week_years = (list(range(-30, 31)) + list(range(1575, 1591)) +
                      list(range(1995, 2031)))
        for week_year in week_years:
            weeks = (CalendarDate.first_week_monday(week_year + 1) -
                     CalendarDate.first_week_monday(week_year)) // 7
            for week in range(1, weeks + 1):
                for day_of_week in range(1, 8):
                    date = CalendarDate.from_week_components(
                        week_year, week, day_of_week)
                    self.assertEqual(date.calendar_week, week)
                    self.assertEqual(date.day_of_week, day_of_week)
                    self.assertEqual(date.isocalendar(),
                                     (week_year, week, day_of_week))

    def test_first_week_monday(self):
        for year in range(1990, 2040):
            monday = CalendarDate.from_day_count(
                CalendarDate.first_week_monday(year))
            self.assertEqual(monday.day_of_week, 1)
            self.assertEqual(monday.calendar_week, 1)
            # week 1 contains the first thursday of the year
            self.assertEqual((monday + 3).year, year)
            self.assertTrue((monday + 3).day <= 7)


def test_hash():
    assert hash(CalendarDate(2000, 1, 1)) == (2000 << 16) ^ (1 << 8) ^ 1
    assert hash(CalendarDate(2000, 1, 1)) == hash(CalendarDate.from_day_count(0))
    assert len({CalendarDate(2000, 1, 1), CalendarDate.from_day_count(0),
                CalendarDate(2000, 1, 2)}) == 2


def test_replace():
    date = CalendarDate(2000, 2, 29)
    assert date.replace(day=1) == CalendarDate(2000, 2, 1)
    assert date.replace(year=2004, month=1) == CalendarDate(2004, 1, 29)
    with pytest.raises(InvalidCalendarDate):
        date.replace(year=2001)
    with pytest.raises(TypeError):
        date.replace(hour=1)


def test_immutable():
    date = CalendarDate(2000, 1, 1)
    with pytest.raises(AttributeError):
        date.year = 2001
    with pytest.raises(AttributeError):
        date.calendar_week = 2


def test_pickling():
    date = CalendarDate(1582, 10, 15)
    deserialized = pickle.loads(pickle.dumps(date))
    assert date == deserialized
    assert deserialized.j2000_day == date.j2000_day


def test_repr():
    assert repr(CalendarDate(2000, 1, 1)) == 'astrocal.CalendarDate(2000, 1, 1)'
    assert repr(CalendarDate(-45, 3, 2)) == 'astrocal.CalendarDate(-45, 3, 2)'


if __name__ == '__main__':
    unittest.main()
