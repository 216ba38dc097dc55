from .weekdays import preceding_weekday, following_weekday, nearest_weekday, relative_weekday
from .annual_rules import AnnualDateRule, DayAndMonthRule, DayOfWeekInMonthRule, EasterSundayRule, RelativeDayOfWeekRule
