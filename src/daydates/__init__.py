from .__version__ import __version__
from .dates import DayDate, DayDateFactory, SpreadsheetDateFactory, DateContext, DEFAULT_CONTEXT, make_date
from .dates import Month, Weekday, WeekOfMonth, WeekdayRelation, RangeInclusion, NameTable, ENGLISH
from .dates import DayDateError, InvalidDateError, InvalidMonthError, InvalidWeekdayError, OutOfRangeError
from .rules import preceding_weekday, following_weekday, nearest_weekday, relative_weekday
from .rules import AnnualDateRule, DayAndMonthRule, DayOfWeekInMonthRule, EasterSundayRule, RelativeDayOfWeekRule
