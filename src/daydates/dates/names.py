from dataclasses import dataclass

from .units import Month, Weekday


@dataclass(frozen=True, slots=True)
class NameTable:
    '''
    Month and weekday names for one locale, indexed by Month and Weekday value.
    '''
    month_names: tuple[str, ...]
    month_abbreviations: tuple[str, ...]
    weekday_names: tuple[str, ...]
    weekday_abbreviations: tuple[str, ...]

    def __post_init__(self):
        expected_sizes = {'month_names': 12, 'month_abbreviations': 12, 'weekday_names': 7, 'weekday_abbreviations': 7}
        for attribute, size in expected_sizes.items():
            if len(getattr(self, attribute)) != size:
                raise ValueError(f'{attribute} must have {size} entries. Got {len(getattr(self, attribute))}')

    def month_name(self, month: int, short: bool=False) -> str:
        month = Month.make(month)
        names = self.month_abbreviations if short else self.month_names
        return names[month - 1]

    def weekday_name(self, weekday: int, short: bool=False) -> str:
        weekday = Weekday.make(weekday)
        names = self.weekday_abbreviations if short else self.weekday_names
        return names[weekday - 1]

    def parse_month(self, text: str) -> Month | None:
        text = text.strip()
        if text.isdecimal():
            index = int(text)
            return Month(index) if 1 <= index <= 12 else None
        return _match_name(text, Month, self.month_names, self.month_abbreviations)

    def parse_weekday(self, text: str) -> Weekday | None:
        return _match_name(text.strip(), Weekday, self.weekday_names, self.weekday_abbreviations)

    def format_date(self, day_date, short: bool=False) -> str:
        return f'{day_date.day}-{self.month_name(day_date.month, short=short)}-{day_date.year}'


def _match_name(text: str, unit: type[Month] | type[Weekday], names: tuple[str, ...], abbreviations: tuple[str, ...]):
    if not text:
        return None
    folded = text.casefold()
    for index, (name, abbreviation) in enumerate(zip(names, abbreviations), start=1):
        if folded in (name.casefold(), abbreviation.casefold()):
            return unit(index)
    return None


ENGLISH = NameTable(
    month_names=('January', 'February', 'March', 'April', 'May', 'June', 'July',
                 'August', 'September', 'October', 'November', 'December'),
    month_abbreviations=('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec'),
    weekday_names=('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday'),
    weekday_abbreviations=('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'),
)
