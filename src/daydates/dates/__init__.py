from .errors import DayDateError, InvalidDateError, InvalidMonthError, InvalidWeekdayError, OutOfRangeError
from .calendar_math import MIN_YEAR, MAX_YEAR, MIN_ORDINAL, MAX_ORDINAL, is_leap_year, leap_year_count, last_day_of_month, to_ordinal, from_ordinal
from .units import Month, Weekday, WeekOfMonth, WeekdayRelation, RangeInclusion
from .names import NameTable, ENGLISH
from .day_date import DayDate
from .factories import DayDateFactory, SpreadsheetDateFactory, DateContext, DEFAULT_CONTEXT, make_date
from .day_counts import get_day_count, get_time_fraction
