from datetime import date

import pytest

from . import core


def test_leap_remainders_follow_33_year_cycle():
    leap_years = [y for y in range(1, 34) if core.is_persian_leap_year(y)]
    assert leap_years == [1, 5, 9, 13, 17, 22, 26, 30]


def test_recent_leap_years():
    assert core.is_persian_leap_year(1399)
    assert core.is_persian_leap_year(1403)
    assert not core.is_persian_leap_year(1402)
    assert not core.is_persian_leap_year(1404)


def test_years_before_epoch_are_not_leap():
    assert not core.is_persian_leap_year(0)
    assert not core.is_persian_leap_year(-32)


def test_gregorian_leap_rule():
    assert core.is_gregorian_leap_year(2024)
    assert core.is_gregorian_leap_year(2000)
    assert not core.is_gregorian_leap_year(1900)
    assert not core.is_gregorian_leap_year(2023)


def test_month_lengths():
    assert core.month_lengths(1402) == [31] * 6 + [30] * 5 + [29]
    assert core.month_lengths(1403)[-1] == 30
    assert core.year_length(1402) == 365
    assert core.year_length(1403) == 366


def test_days_in_invalid_month_is_zero():
    assert core.days_in_month(1403, 0) == 0
    assert core.days_in_month(1403, 13) == 0


def test_days_before_year_matches_known_new_year():
    offset = core.days_before_year(1403)
    assert date.fromordinal(core.PERSIAN_EPOCH.toordinal() + offset) == date(2024, 3, 20)


def test_days_before_year_range():
    assert core.days_before_year(1) == 0
    with pytest.raises(ValueError):
        core.days_before_year(0)


def test_days_before_month():
    assert core.days_before_month(1403, 1) == 0
    assert core.days_before_month(1403, 7) == 186
    assert core.days_before_month(1403, 12) == 336


def test_month_day_from_offset_walks_months():
    assert core.month_day_from_offset(1403, 0) == (1, 1)
    assert core.month_day_from_offset(1403, 31) == (2, 1)
    assert core.month_day_from_offset(1403, 365) == (12, 30)
    with pytest.raises(ValueError):
        core.month_day_from_offset(1402, 365)


def test_month_names():
    assert core.month_name(1) == "فروردین"
    assert core.month_name(12) == "اسفند"
    assert core.month_name(13) is None
    assert core.MONTH_NAMES_ENGLISH[9] == "Dey"


def test_leap_cycle_repeats_every_33_years():
    for year in range(1, 400):
        assert core.is_persian_leap_year(year) == core.is_persian_leap_year(year + 33)


def test_month_lengths_sum_to_year_length():
    for year in range(1, 200):
        assert sum(core.month_lengths(year)) == core.year_length(year)
