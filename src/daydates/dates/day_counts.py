import numpy as np

from .day_date import DayDate


def _gdc_dd(sd: DayDate, ed: DayDate) -> int:
    return ed.ordinal - sd.ordinal
def _gdc_dl(sd: DayDate, eds: list[DayDate]) -> np.ndarray:
    return np.array([ed.ordinal for ed in eds]) - sd.ordinal
def _gdc_ld(sds: list[DayDate], ed: DayDate) -> np.ndarray:
    return ed.ordinal - np.array([sd.ordinal for sd in sds])
def _gdc_ll(sds: list[DayDate], eds: list[DayDate]) -> np.ndarray:
    if len(sds) == len(eds):
        return np.array([ed.ordinal for ed in eds]) - np.array([sd.ordinal for sd in sds])
    else:
        raise ValueError(f'Length of start_dates and end_dates must match. Got lengths {len(sds)} and {len(eds)}')

_method_mapper = {
    (DayDate, DayDate): _gdc_dd,
    (DayDate, list): _gdc_dl,
    (list, DayDate): _gdc_ld,
    (list, list): _gdc_ll
}

def get_day_count(start_date: DayDate | list[DayDate], end_date: DayDate | list[DayDate]) -> int | np.ndarray:
    try:
        method = _method_mapper[(type(start_date), type(end_date))]
    except KeyError:
        raise TypeError(f'Input types start_date: {type(start_date)} and end_date: {type(end_date)} are not mapped. Mapped values:\n{list(_method_mapper.keys())}') from None
    return method(start_date, end_date)

def get_time_fraction(start_date: DayDate | list[DayDate], end_date: DayDate | list[DayDate], time_fraction_base: int=365) -> float | np.ndarray:
    days = get_day_count(start_date, end_date)
    return days / time_fraction_base
