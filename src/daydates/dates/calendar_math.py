'''
Ordinal day arithmetic for the proleptic Gregorian calendar.

Ordinal 2 is 1 January 1900 and every later day adds one, up to
31 December 9999. Functions here take and return plain ints and do no range
validation; that is the job of the date factories.
'''
import logging


logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 9999

LAST_DAY_OF_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
LEAP_YEAR_DAYS_BEFORE_MONTH = (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)

# 1 Jan MIN_YEAR lands on ordinal 2
ORDINAL_OFFSET = 1

# The corrected year estimate is never more than one year short.
YEAR_SCAN_LIMIT = 2
MONTH_SCAN_LIMIT = 12


def is_leap_year(year: int) -> bool:
    if year % 4 != 0:
        return False
    elif year % 400 == 0:
        return True
    elif year % 100 == 0:
        return False
    else:
        return True

def leap_year_count(year: int) -> int:
    '''
    Number of leap years from MIN_YEAR up to and including year. Zero for 1899 and 1900.
    '''
    leap4 = (year - 1896) // 4
    leap100 = (year - 1800) // 100
    leap400 = (year - 1600) // 400
    return leap4 - leap100 + leap400

def last_day_of_month(month: int, year: int) -> int:
    last_day = LAST_DAY_OF_MONTH[month]
    if month == 2 and is_leap_year(year):
        return last_day + 1
    return last_day

def days_before_month(year: int) -> tuple[int, ...]:
    return LEAP_YEAR_DAYS_BEFORE_MONTH if is_leap_year(year) else DAYS_BEFORE_MONTH

def to_ordinal(day: int, month: int, year: int) -> int:
    years_contribution = (year - MIN_YEAR) * 365 + leap_year_count(year - 1)
    months_contribution = days_before_month(year)[month]
    return years_contribution + months_contribution + day + ORDINAL_OFFSET

def _resolve_year(ordinal: int) -> int:
    days = ordinal - MIN_ORDINAL
    overestimated_year = MIN_YEAR + days // 365
    non_leap_days = days - leap_year_count(overestimated_year)
    year = MIN_YEAR + non_leap_days // 365
    if year == overestimated_year:
        return year

    logger.debug('Year estimates for ordinal %s disagree (%s vs %s), scanning forward', ordinal, year, overestimated_year)
    for _ in range(YEAR_SCAN_LIMIT):
        if to_ordinal(1, 1, year + 1) > ordinal:
            return year
        year += 1
    raise RuntimeError(f'Year scan for ordinal {ordinal} exceeded {YEAR_SCAN_LIMIT} steps. Last year tried: {year}')

def from_ordinal(ordinal: int) -> tuple[int, int, int]:
    year = _resolve_year(ordinal)
    day_of_year = ordinal - to_ordinal(1, 1, year)
    cumulative_days = days_before_month(year)
    for month in range(1, MONTH_SCAN_LIMIT + 1):
        if day_of_year < cumulative_days[month + 1]:
            day = day_of_year - cumulative_days[month] + 1
            return day, month, year
    raise RuntimeError(f'Month scan for ordinal {ordinal} found no month in year {year}.')

def weekday_index(ordinal: int) -> int:
    '''
    ISO weekday of an ordinal: 1 is Monday, 7 is Sunday.
    '''
    return (ordinal + 5) % 7 + 1


MIN_ORDINAL = to_ordinal(1, 1, MIN_YEAR)
MAX_ORDINAL = to_ordinal(31, 12, MAX_YEAR)
