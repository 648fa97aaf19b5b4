from ._errors import AstrocalError, InvalidCalendarDate, InvalidWeekDate, \
                     InvalidTimeOfDay, InvalidSecondsOfDay, AstrocalWarning
from ._calendars import PROLEPTIC_JULIAN, JULIAN, GREGORIAN, \
                        GREGORIAN_START_DAY, JULIAN_START_DAY, MJD_TO_J2000, \
                        is_leap
from ._dates import CalendarDate
from ._dates import JULIAN_EPOCH, MODIFIED_JULIAN_EPOCH, FIFTIES_EPOCH, \
                    CCSDS_EPOCH, GALILEO_EPOCH, GPS_EPOCH, QZSS_EPOCH, \
                    IRNSS_EPOCH, BEIDOU_EPOCH, GLONASS_EPOCH, J2000_EPOCH, \
                    UNIX_EPOCH, MAX_EPOCH, MIN_EPOCH
from ._times import TimeOfDay, H00, H12, SECONDS_PER_DAY, TIME_TOLERANCE
from ._datetimes import DateTimeValue, JULIAN_EPOCH_DATETIME
from ._arrays import day_to_ymd, ymd_to_day, num2date, date2num

__version__ = '1.0.0'
