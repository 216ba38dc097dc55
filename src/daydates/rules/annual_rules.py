from abc import ABC, abstractmethod
from collections.abc import Callable
from copy import copy
import logging
from typing import Self

from dateutil.easter import easter

from ..dates import DEFAULT_CONTEXT, DateContext, DayDate, Month, OutOfRangeError, Weekday, WeekdayRelation, WeekOfMonth, last_day_of_month
from .weekdays import relative_weekday


logger = logging.getLogger(__name__)


class AnnualDateRule(ABC):
    '''
    A rule that yields one date per year, e.g. a holiday. get_date validates the year
    against the context's factory before the rule is evaluated.
    '''
    def __init__(self, context: DateContext=DEFAULT_CONTEXT):
        self.context = context

    def get_date(self, year: int) -> DayDate | None:
        if not self.context.factory.is_supported_year(year):
            raise OutOfRangeError(f'{type(self).__name__}: year must be in range {self.context.factory.min_year} to {self.context.factory.max_year}. Got {year}')
        return self._get_date(year)

    def __call__(self, year: int) -> DayDate | None:
        return self.get_date(year)

    @abstractmethod
    def _get_date(self, year: int) -> DayDate | None:
        pass

    @abstractmethod
    def copy(self) -> Self:
        pass

    def __copy__(self) -> Self:
        return self.copy()


class DayAndMonthRule(AnnualDateRule):
    def __init__(self, day: int=1, month: Month | int=Month.JANUARY, context: DateContext=DEFAULT_CONTEXT):
        super().__init__(context)
        self.month = Month.make(month)
        if not 1 <= day <= self.month.last_day(2000):
            raise ValueError(f'day must be in range 1 to {self.month.last_day(2000)} for {self.month.name.capitalize()}. Got {day}')
        self.day = day

    def _get_date(self, year: int) -> DayDate:
        # 29 February falls back to the 28th in non-leap years
        day = min(self.day, last_day_of_month(self.month, year))
        return self.context.make_date(day, self.month, year)

    def copy(self) -> Self:
        return DayAndMonthRule(self.day, self.month, context=self.context)


class DayOfWeekInMonthRule(AnnualDateRule):
    '''
    Nth weekday of a month, e.g. third Monday of January. WeekOfMonth.LAST picks the last
    occurrence in the month.
    '''
    def __init__(self, week: WeekOfMonth | int, weekday: Weekday | int, month: Month | int, context: DateContext=DEFAULT_CONTEXT):
        super().__init__(context)
        self.week = WeekOfMonth(week)
        self.weekday = Weekday.make(weekday)
        self.month = Month.make(month)

    def _get_date(self, year: int) -> DayDate:
        if self.week == WeekOfMonth.LAST:
            last_day = self.context.make_date(last_day_of_month(self.month, year), self.month, year)
            days_to_subtract = (last_day.weekday - self.weekday) % 7
            return last_day.add_days(-days_to_subtract)
        first_day = self.context.make_date(1, self.month, year)
        days_to_add = (self.weekday - first_day.weekday) % 7
        return first_day.add_days(days_to_add + 7 * (self.week - 1))

    def copy(self) -> Self:
        return DayOfWeekInMonthRule(self.week, self.weekday, self.month, context=self.context)


class EasterSundayRule(AnnualDateRule):
    def _get_date(self, year: int) -> DayDate:
        return self.context.make_date(easter(year))

    def copy(self) -> Self:
        return EasterSundayRule(context=self.context)


class RelativeDayOfWeekRule(AnnualDateRule):
    '''
    The weekday preceding, nearest to or following the date another rule gives for the
    same year. Good Friday is the Friday preceding Easter Sunday.

    subrule can be any callable taking a year and returning a DayDate or None.
    '''
    def __init__(self, subrule: Callable[[int], DayDate | None] | None=None, weekday: Weekday | int=Weekday.MONDAY,
                 relation: WeekdayRelation=WeekdayRelation.FOLLOWING, context: DateContext=DEFAULT_CONTEXT):
        super().__init__(context)
        if subrule is None:
            subrule = DayAndMonthRule(context=context)
        self.subrule = subrule
        self.weekday = Weekday.make(weekday)
        self.relation = WeekdayRelation(relation)

    def _get_date(self, year: int) -> DayDate | None:
        base = self.subrule(year)
        if base is None:
            logger.debug('Sub-rule %r gave no date for %s', self.subrule, year)
            return None
        return relative_weekday(self.weekday, base, self.relation)

    def copy(self) -> Self:
        subrule = copy(self.subrule) if isinstance(self.subrule, AnnualDateRule) else self.subrule
        return RelativeDayOfWeekRule(subrule, self.weekday, self.relation, context=self.context)
