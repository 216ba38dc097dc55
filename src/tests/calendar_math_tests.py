from datetime import date
import logging

import pytest

from daydates.dates import calendar_math
from daydates.dates.calendar_math import (MAX_ORDINAL, MAX_YEAR, MIN_ORDINAL, MIN_YEAR, from_ordinal, is_leap_year,
                                          last_day_of_month, leap_year_count, to_ordinal, weekday_index)

# Python ordinal of the day before ordinal 1
EPOCH = date(1899, 12, 30).toordinal()


def _ordinals_to_check():
    ordinals = set(range(MIN_ORDINAL, MIN_ORDINAL + 1500))
    ordinals.update(range(to_ordinal(1, 1, 1999), to_ordinal(31, 12, 2001) + 1))
    ordinals.update(range(MAX_ORDINAL - 1500, MAX_ORDINAL + 1))
    for year in range(MIN_YEAR, MAX_YEAR + 1):
        start = to_ordinal(1, 1, year)
        ordinals.update((start, start - 1, start + 59, start + 60))
    return sorted(o for o in ordinals if MIN_ORDINAL <= o <= MAX_ORDINAL)


def test_is_leap_year():
    assert not is_leap_year(1900), '1900 is not a leap year'
    assert is_leap_year(2000), '2000 is a leap year'
    assert is_leap_year(2004)
    assert not is_leap_year(2003)
    assert not is_leap_year(2100)
    for year in range(MIN_YEAR, 2500):
        expected = date(year, 3, 1).toordinal() - date(year, 2, 28).toordinal() == 2
        assert is_leap_year(year) == expected, f'Leap year mismatch for {year}'

def test_leap_year_count():
    expected_counts = {1899: 0, 1900: 0, 1903: 0, 1904: 1, 1999: 24, 2000: 25}
    for year, expected in expected_counts.items():
        test_value = leap_year_count(year)
        assert test_value == expected, f'Leap years up to {year} should be {expected}. Obtained value: {test_value}'

def test_leap_year_count_is_additive():
    years = list(range(1899, 2450, 7)) + [2000, 2100, 2400, 9998, 9999]
    for y1 in years:
        for y2 in years:
            if y2 <= y1:
                continue
            expected = sum(is_leap_year(y) for y in range(y1 + 1, y2 + 1))
            assert leap_year_count(y2) - leap_year_count(y1) == expected, f'Leap count between {y1} and {y2} should be {expected}'

def test_last_day_of_month():
    assert last_day_of_month(1, 2001) == 31
    assert last_day_of_month(2, 1900) == 28
    assert last_day_of_month(2, 2000) == 29
    assert last_day_of_month(2, 2001) == 28
    assert last_day_of_month(4, 2001) == 30
    assert last_day_of_month(12, 9999) == 31

def test_ordinal_bounds():
    assert MIN_ORDINAL == 2 == to_ordinal(1, 1, 1900)
    assert MAX_ORDINAL == 2958465 == to_ordinal(31, 12, 9999)
    assert from_ordinal(MIN_ORDINAL) == (1, 1, 1900)
    assert from_ordinal(MAX_ORDINAL) == (31, 12, 9999)

def test_ordinals_match_python_dates():
    for year in (1900, 1901, 1999, 2000, 2004, 2100, 2400, 9999):
        for month in range(1, 13):
            for day in range(1, last_day_of_month(month, year) + 1):
                expected = date(year, month, day).toordinal() - EPOCH
                test_value = to_ordinal(day, month, year)
                assert test_value == expected, f'Ordinal of {day}-{month}-{year} should be {expected}. Obtained value: {test_value}'

def test_spreadsheet_serials_after_february_1900():
    assert to_ordinal(1, 3, 1900) == 61
    assert to_ordinal(9, 11, 2001) == 37204
    assert to_ordinal(1, 1, 2000) == 36526

def test_from_ordinal_is_inverse_of_to_ordinal():
    for ordinal in _ordinals_to_check():
        day, month, year = from_ordinal(ordinal)
        expected = date.fromordinal(ordinal + EPOCH)
        assert (day, month, year) == (expected.day, expected.month, expected.year), f'Ordinal {ordinal} should be {expected}. Obtained value: {(day, month, year)}'
        assert to_ordinal(day, month, year) == ordinal

def test_from_ordinal_on_boundaries():
    new_year = to_ordinal(1, 1, 2001)
    assert from_ordinal(new_year) == (1, 1, 2001)
    assert from_ordinal(new_year - 1) == (31, 12, 2000)
    march = to_ordinal(1, 3, 2000)
    assert from_ordinal(march) == (1, 3, 2000)
    assert from_ordinal(march - 1) == (29, 2, 2000)
    march = to_ordinal(1, 3, 1900)
    assert from_ordinal(march - 1) == (28, 2, 1900)

def test_year_scan_limit_is_enforced(monkeypatch):
    # 31 Dec 2000 needs the forward scan: the two estimates are 2000 and 2001
    ordinal = to_ordinal(31, 12, 2000)
    monkeypatch.setattr(calendar_math, 'YEAR_SCAN_LIMIT', 0)
    with pytest.raises(RuntimeError):
        from_ordinal(ordinal)

def test_year_scan_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger='daydates.dates.calendar_math')
    from_ordinal(to_ordinal(31, 12, 2000))
    assert 'scanning forward' in caplog.text

def test_ordinals_are_monotonic():
    for year in (1900, 2000, 2001):
        previous = None
        for month in range(1, 13):
            for day in range(1, last_day_of_month(month, year) + 1):
                ordinal = to_ordinal(day, month, year)
                if previous is not None:
                    assert ordinal == previous + 1, f'{day}-{month}-{year} should follow ordinal {previous}'
                previous = ordinal

def test_weekday_index():
    assert weekday_index(MIN_ORDINAL) == 1, '1 January 1900 was a Monday'
    for ordinal in range(MIN_ORDINAL, MIN_ORDINAL + 800, 3):
        assert weekday_index(ordinal) == date.fromordinal(ordinal + EPOCH).isoweekday()
