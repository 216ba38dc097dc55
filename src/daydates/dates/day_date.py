from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Self

from .calendar_math import from_ordinal, last_day_of_month, weekday_index
from .errors import InvalidDateError
from .units import Month, RangeInclusion, Weekday

if TYPE_CHECKING:
    from .factories import DayDateFactory


@dataclass(frozen=True, slots=True, order=True)
class DayDate:
    '''
    A calendar day. Build instances through a DayDateFactory, which validates the
    triple; equality, hashing and ordering only look at the ordinal.
    '''
    ordinal: int
    day: int = field(compare=False)
    month: Month = field(compare=False)
    year: int = field(compare=False)
    factory: 'DayDateFactory' = field(compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'month', Month.make(self.month))
        if not self.factory.min_ordinal <= self.ordinal <= self.factory.max_ordinal:
            raise InvalidDateError(f'Ordinal must be in range {self.factory.min_ordinal} to {self.factory.max_ordinal}. Got {self.ordinal}')
        if from_ordinal(self.ordinal) != (self.day, self.month, self.year):
            raise InvalidDateError(f'Ordinal {self.ordinal} does not match {self.day}-{self.month.name.capitalize()}-{self.year}.')

    @property
    def weekday(self) -> Weekday:
        return Weekday(weekday_index(self.ordinal))

    def add_days(self, days: int) -> Self:
        return self.factory.make_date(self.ordinal + days)

    def add_months(self, months: int) -> Self:
        year, month_index = divmod(12 * self.year + self.month - 1 + months, 12)
        month = month_index + 1
        day = min(self.day, last_day_of_month(month, year))
        return self.factory.make_date(day, month, year)

    def add_years(self, years: int) -> Self:
        year = self.year + years
        day = min(self.day, last_day_of_month(self.month, year))
        return self.factory.make_date(day, self.month, year)

    def end_of_month(self) -> Self:
        return self.factory.make_date(last_day_of_month(self.month, self.year), self.month, self.year)

    def compare(self, other: Self) -> int:
        return self.ordinal - other.ordinal

    def is_on(self, other: Self) -> bool:
        return self.ordinal == other.ordinal

    def is_before(self, other: Self) -> bool:
        return self.ordinal < other.ordinal

    def is_on_or_before(self, other: Self) -> bool:
        return self.ordinal <= other.ordinal

    def is_after(self, other: Self) -> bool:
        return self.ordinal > other.ordinal

    def is_on_or_after(self, other: Self) -> bool:
        return self.ordinal >= other.ordinal

    def is_in_range(self, d1: Self, d2: Self, include: RangeInclusion=RangeInclusion.BOTH) -> bool:
        '''
        Membership in the interval spanned by d1 and d2, in either order. FIRST and SECOND
        refer to the earlier and the later boundary.
        '''
        include = RangeInclusion(include)
        start, end = sorted((d1.ordinal, d2.ordinal))
        s = self.ordinal
        if include == RangeInclusion.BOTH:
            return start <= s <= end
        elif include == RangeInclusion.FIRST:
            return start <= s < end
        elif include == RangeInclusion.SECOND:
            return start < s <= end
        else:
            return start < s < end

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __add__(self, days: int) -> Self:
        if not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    __radd__ = __add__

    def __sub__(self, other: Self | int) -> Self | int:
        if isinstance(other, DayDate):
            return self.ordinal - other.ordinal
        if isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented

    def __str__(self) -> str:
        return f'{self.day}-{self.month.name.capitalize()}-{self.year}'
