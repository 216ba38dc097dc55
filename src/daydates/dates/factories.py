from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from multimethod import multimethod

from .calendar_math import MAX_YEAR, MIN_YEAR, from_ordinal, last_day_of_month, to_ordinal
from .day_date import DayDate
from .errors import InvalidDateError
from .names import ENGLISH, NameTable
from .units import Month


class DayDateFactory(ABC):
    '''
    Construction strategy for DayDate. Subclasses supply the two primitive constructors and
    the supported year range; make_date dispatches the public overloads onto them.
    '''
    @property
    @abstractmethod
    def min_year(self) -> int:
        pass

    @property
    @abstractmethod
    def max_year(self) -> int:
        pass

    @abstractmethod
    def _make_from_ordinal(self, ordinal: int) -> DayDate:
        pass

    @abstractmethod
    def _make_from_triple(self, day: int, month: int, year: int) -> DayDate:
        pass

    @multimethod
    def make_date(self, ordinal: int) -> DayDate:
        return self._make_from_ordinal(ordinal)

    @multimethod
    def make_date(self, day: int, month: int, year: int) -> DayDate:
        return self._make_from_triple(day, month, year)

    @multimethod
    def make_date(self, platform_date: date) -> DayDate:
        return self._make_from_triple(platform_date.day, platform_date.month, platform_date.year)

    @property
    def min_ordinal(self) -> int:
        return to_ordinal(1, 1, self.min_year)

    @property
    def max_ordinal(self) -> int:
        return to_ordinal(31, 12, self.max_year)

    def is_supported_year(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year


class SpreadsheetDateFactory(DayDateFactory):
    @property
    def min_year(self) -> int:
        return MIN_YEAR

    @property
    def max_year(self) -> int:
        return MAX_YEAR

    def _make_from_ordinal(self, ordinal: int) -> DayDate:
        if not self.min_ordinal <= ordinal <= self.max_ordinal:
            raise InvalidDateError(f'Ordinal must be in range {self.min_ordinal} to {self.max_ordinal}. Got {ordinal}')
        day, month, year = from_ordinal(ordinal)
        return DayDate(ordinal, day, Month(month), year, factory=self)

    def _make_from_triple(self, day: int, month: int, year: int) -> DayDate:
        if not self.is_supported_year(year):
            raise InvalidDateError(f'Year must be in range {self.min_year} to {self.max_year}. Got {year}')
        month = Month.make(month)
        last_day = last_day_of_month(month, year)
        if not 1 <= day <= last_day:
            raise InvalidDateError(f'Day must be in range 1 to {last_day} for {month.name.capitalize()} {year}. Got {day}')
        return DayDate(to_ordinal(day, month, year), day, month, year, factory=self)


@dataclass(frozen=True, slots=True)
class DateContext:
    '''
    Explicit carrier of the date construction strategy and the name table. Pass one to
    whatever needs to build or print dates instead of swapping a global factory.
    '''
    factory: DayDateFactory = field(default_factory=SpreadsheetDateFactory)
    names: NameTable = field(default=ENGLISH)

    def make_date(self, *args) -> DayDate:
        return self.factory.make_date(*args)

    def format_date(self, day_date: DayDate, short: bool=False) -> str:
        return self.names.format_date(day_date, short=short)


DEFAULT_CONTEXT = DateContext()


def make_date(*args, context: DateContext=DEFAULT_CONTEXT) -> DayDate:
    return context.make_date(*args)
