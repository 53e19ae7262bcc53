from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from persian_calendar import (
    ArithmeticOverflowError,
    GregorianConversionError,
    InvalidTimeError,
    LocalTimeResolver,
    PersianDate,
    PersianDateTime,
    ZonedPersianDateTime,
)

TEHRAN = ZoneInfo("Asia/Tehran")
NEW_YORK = ZoneInfo("America/New_York")


def test_new_in_tehran():
    z = ZonedPersianDateTime.new(1403, 1, 1, 12, 0, 0, TEHRAN)
    assert z.offset == timedelta(hours=3, minutes=30)
    assert z.to_gregorian() == datetime(2024, 3, 20, 8, 30, tzinfo=timezone.utc)
    assert str(z) == "1403/01/01 12:00:00 +03:30"
    assert (z.year, z.month, z.day, z.hour, z.minute, z.second) == (1403, 1, 1, 12, 0, 0)
    assert z.date() == PersianDate(1403, 1, 1)
    assert z.datetime() == PersianDateTime.from_parts(1403, 1, 1, 12, 0, 0)
    assert z.timezone is TEHRAN


def test_ambiguous_time_picks_earlier_instant():
    z = ZonedPersianDateTime.new(1403, 8, 13, 1, 30, 0, NEW_YORK)
    assert z.offset == timedelta(hours=-4)
    assert str(z) == "1403/08/13 01:30:00 -04:00"


def test_nonexistent_time_is_invalid():
    with pytest.raises(InvalidTimeError):
        ZonedPersianDateTime.new(1402, 12, 20, 2, 30, 0, NEW_YORK)


def test_duration_arithmetic_uses_elapsed_time():
    z = ZonedPersianDateTime.new(1403, 8, 13, 1, 30, 0, NEW_YORK)
    later = z + timedelta(hours=1)
    assert (later.hour, later.minute) == (1, 30)
    assert later.offset == timedelta(hours=-5)
    assert later - z == timedelta(hours=1)
    assert later.sub_duration(timedelta(hours=1)) == z


def test_equality_compares_instants():
    z = ZonedPersianDateTime.new(1403, 1, 1, 12, 0, 0, TEHRAN)
    utc = z.with_timezone(timezone.utc)
    assert utc == z
    assert hash(utc) == hash(z)
    assert (utc.hour, utc.minute) == (8, 30)
    assert z < z + timedelta(seconds=1)
    assert len({z, utc}) == 1


def test_from_gregorian_requires_aware_datetime():
    aware = datetime(2024, 3, 20, 8, 30, tzinfo=timezone.utc)
    assert ZonedPersianDateTime.from_gregorian(aware).date() == PersianDate(1403, 1, 1)
    with pytest.raises(ValueError):
        ZonedPersianDateTime.from_gregorian(datetime(2024, 3, 20))


def test_format_uses_wall_clock():
    z = ZonedPersianDateTime.new(1403, 1, 1, 12, 0, 0, TEHRAN)
    assert z.format("%Y/%m/%d %H:%M") == "1403/01/01 12:00"


def test_custom_resolver():
    class NoTimes(LocalTimeResolver):
        def resolve(self, local, tz):
            return []

    with pytest.raises(InvalidTimeError):
        ZonedPersianDateTime.new(1403, 1, 1, 12, 0, 0, TEHRAN, resolver=NoTimes())


def test_now_in_zone():
    z = ZonedPersianDateTime.now(TEHRAN)
    assert z.timezone is TEHRAN
    assert z.datetime().is_valid()


def test_folded_times_in_one_zone_are_ordered_by_instant():
    first = ZonedPersianDateTime.new(1403, 8, 13, 1, 30, 0, NEW_YORK)
    second = first + timedelta(hours=1)
    assert first != second
    assert first < second
    assert len({first, second}) == 2


def test_add_duration_past_the_end_of_the_range():
    z = ZonedPersianDateTime(datetime(9999, 12, 31, 20, 0, tzinfo=TEHRAN))
    with pytest.raises(ArithmeticOverflowError):
        z.add_duration(timedelta(hours=4))
    with pytest.raises(ArithmeticOverflowError):
        z + timedelta(days=1)


def test_with_timezone_past_the_end_of_the_range():
    z = ZonedPersianDateTime(datetime(9999, 12, 31, 23, 0, tzinfo=timezone.utc))
    with pytest.raises(GregorianConversionError):
        z.with_timezone(TEHRAN)


def test_new_past_the_end_of_the_range():
    with pytest.raises(GregorianConversionError):
        ZonedPersianDateTime.new(9378, 10, 10, 22, 0, 0, NEW_YORK)


def test_instants_at_the_range_ends_still_compare():
    late = ZonedPersianDateTime(datetime(9999, 12, 31, 23, 0, tzinfo=NEW_YORK))
    early = ZonedPersianDateTime(datetime(1, 1, 1, 1, 0, tzinfo=TEHRAN))
    assert early < late
    assert hash(late) == hash(ZonedPersianDateTime(datetime(9999, 12, 31, 23, 0, tzinfo=NEW_YORK)))


def test_repr_before_the_epoch_falls_back_to_gregorian():
    z = ZonedPersianDateTime(datetime(622, 3, 20, 23, 0, tzinfo=timezone.utc))
    with pytest.raises(GregorianConversionError):
        z.datetime()
    assert repr(z).startswith("ZonedPersianDateTime(datetime.datetime(622, 3, 20, 23, 0")
