from datetime import date, datetime, timedelta

import pytest

from persian_calendar import (
    ArithmeticOverflowError,
    InvalidDateError,
    InvalidTimeError,
    PersianDate,
    PersianDateTime,
)


def test_constructor_validates_date_then_time():
    dt = PersianDateTime.from_parts(1403, 1, 1, 23, 59, 59)
    assert dt.time() == (23, 59, 59)
    with pytest.raises(InvalidDateError):
        PersianDateTime.from_parts(1402, 12, 30, 25, 0, 0)
    with pytest.raises(InvalidTimeError):
        PersianDateTime.from_parts(1403, 1, 1, 24, 0, 0)
    with pytest.raises(InvalidTimeError):
        PersianDateTime(PersianDate(1403, 1, 1), 0, 60, 0)


def test_unchecked_parts():
    dt = PersianDateTime.from_unchecked_parts(1403, 1, 1, 25, 0, 0)
    assert not dt.is_valid()
    with pytest.raises(InvalidTimeError):
        dt.to_gregorian()


def test_gregorian_conversion():
    dt = PersianDateTime.from_parts(1403, 1, 1, 12, 30, 45)
    assert dt.to_gregorian() == datetime(2024, 3, 20, 12, 30, 45)
    assert PersianDateTime.from_gregorian(datetime(2024, 3, 20, 12, 30, 45, 999)) == dt
    assert PersianDateTime.from_gregorian(date(2024, 3, 20)) == PersianDateTime.from_parts(1403, 1, 1)


def test_accessors_delegate_to_date():
    dt = PersianDateTime.from_parts(1403, 1, 4, 8, 0, 0)
    assert (dt.year, dt.month, dt.day) == (1403, 1, 4)
    assert dt.weekday_number() == 0
    assert dt.ordinal() == 4
    assert dt.week_of_year() == 2
    assert dt.start_of_season() == PersianDateTime.from_parts(1403, 1, 1, 8, 0, 0)
    assert dt.end_of_season() == PersianDateTime.from_parts(1403, 3, 31, 8, 0, 0)


def test_add_duration_rolls_over():
    dt = PersianDateTime.from_parts(1403, 12, 30, 23, 59, 59)
    assert dt.add_duration(timedelta(seconds=1)) == PersianDateTime.from_parts(1404, 1, 1)
    assert dt + timedelta(hours=1) == PersianDateTime.from_parts(1404, 1, 1, 0, 59, 59)
    start = PersianDateTime.from_parts(1404, 1, 1)
    assert start.sub_duration(timedelta(seconds=1)) == dt
    assert start - timedelta(seconds=1) == dt


def test_difference_of_datetimes():
    a = PersianDateTime.from_parts(1403, 1, 1, 0, 0, 0)
    b = PersianDateTime.from_parts(1403, 1, 2, 1, 0, 0)
    assert b - a == timedelta(days=1, hours=1)


def test_add_duration_overflow():
    with pytest.raises(ArithmeticOverflowError):
        PersianDateTime.from_parts(9000, 1, 1).add_duration(timedelta(days=999_999_999))


def test_calendar_arithmetic_keeps_time():
    dt = PersianDateTime.from_parts(1403, 1, 31, 10, 20, 30)
    assert dt.add_months(6) == PersianDateTime.from_parts(1403, 7, 30, 10, 20, 30)
    assert dt.add_days(1) == PersianDateTime.from_parts(1403, 2, 1, 10, 20, 30)
    assert dt.sub_days(31) == PersianDateTime.from_parts(1402, 12, 29, 10, 20, 30)
    assert dt.add_years(1).time() == (10, 20, 30)
    with pytest.raises(ValueError):
        dt.sub_months(-1)


def test_with_time_fields():
    dt = PersianDateTime.from_parts(1403, 1, 1, 10, 20, 30)
    assert dt.with_hour(0).time() == (0, 20, 30)
    assert dt.with_minute(59).time() == (10, 59, 30)
    assert dt.with_second(0).time() == (10, 20, 0)
    with pytest.raises(InvalidTimeError):
        dt.with_hour(24)
    with pytest.raises(InvalidDateError):
        PersianDateTime.from_unchecked_parts(1402, 12, 30, 0, 0, 0).with_hour(1)


def test_ordering():
    a = PersianDateTime.from_parts(1403, 1, 1, 23, 0, 0)
    b = PersianDateTime.from_parts(1403, 1, 2, 0, 0, 0)
    assert a < b
    assert max(a, b) is b


def test_str():
    assert str(PersianDateTime.from_parts(1403, 1, 5, 7, 8, 9)) == "1403/01/05 07:08:09"


def test_now_is_valid():
    assert PersianDateTime.now().is_valid()
