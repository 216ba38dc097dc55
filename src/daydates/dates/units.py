from enum import IntEnum
from typing import Self

from .calendar_math import LAST_DAY_OF_MONTH, last_day_of_month
from .errors import InvalidMonthError, InvalidWeekdayError


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def days(self) -> int:
        '''
        Length of the month in a non-leap year.
        '''
        return LAST_DAY_OF_MONTH[self.value]

    def last_day(self, year: int) -> int:
        return last_day_of_month(self.value, year)

    @classmethod
    def make(cls, index: int) -> Self:
        try:
            return cls(index)
        except ValueError:
            raise InvalidMonthError(f'Month index must be in range 1 to 12. Got {index!r}') from None


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def make(cls, index: int) -> Self:
        try:
            return cls(index)
        except ValueError:
            raise InvalidWeekdayError(f'Weekday index must be in range 1 (Monday) to 7 (Sunday). Got {index!r}') from None


class WeekOfMonth(IntEnum):
    LAST = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4


class WeekdayRelation(IntEnum):
    PRECEDING = -1
    NEAREST = 0
    FOLLOWING = 1

    def __str__(self) -> str:
        return self.name.capitalize()


class RangeInclusion(IntEnum):
    NONE = 0
    FIRST = 1
    SECOND = 2
    BOTH = 3
