class DayDateError(ValueError):
    pass


class InvalidDateError(DayDateError):
    pass


class InvalidMonthError(InvalidDateError):
    pass


class InvalidWeekdayError(DayDateError):
    pass


class OutOfRangeError(DayDateError):
    pass
