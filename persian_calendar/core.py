"""Canonical Persian (Jalali) calendar rules.

This module is the single source of truth for the calendar arithmetic
used across the package: leap years, month lengths, the epoch and the
static name tables.  Everything here is a pure function of its inputs or
a read-only constant.

Leap years follow a fixed 33-year cycle.  This is an arithmetic
approximation of the astronomical calendar, not an observation-based
computation, so dates far from the present may differ by a day from
the official calendar.
"""

from __future__ import annotations

from datetime import date
from itertools import accumulate

MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Farvardin 1st of year 1, proleptic Gregorian.
PERSIAN_EPOCH: date = date(622, 3, 21)

LEAP_REMAINDERS: frozenset[int] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

MONTH_NAMES_PERSIAN: tuple[str, ...] = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

MONTH_NAMES_ENGLISH: tuple[str, ...] = (
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
)

# Index 0 is Saturday (Shanbeh).
WEEKDAY_NAMES_PERSIAN: tuple[str, ...] = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)

SEASON_NAMES_PERSIAN: tuple[str, ...] = ("بهار", "تابستان", "پاییز", "زمستان")
SEASON_NAMES_ENGLISH: tuple[str, ...] = ("Spring", "Summer", "Autumn", "Winter")


def is_persian_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the 33-year cycle.

    Years before the epoch are never leap.
    """

    if year <= 0:
        return False
    return year % 33 in LEAP_REMAINDERS


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year``.

    Months 1-6 have 31 days, 7-11 have 30 and Esfand (12) has 30 in a
    leap year and 29 otherwise.  Any other month number yields ``0``;
    callers must treat that as "invalid month", it is not an error.
    """

    if 1 <= month <= 6:
        return 31
    if 7 <= month <= 11:
        return 30
    if month == 12:
        return 30 if is_persian_leap_year(year) else 29
    return 0


def month_lengths(year: int) -> list[int]:
    """Return the twelve month lengths of ``year``."""

    return [days_in_month(year, m) for m in range(1, 13)]


def year_length(year: int) -> int:
    return 366 if is_persian_leap_year(year) else 365


# _DAYS_BEFORE_YEAR[y - 1] is the number of days from the epoch to
# Farvardin 1st of year ``y``, for y in 1..MAX_YEAR + 1.
_DAYS_BEFORE_YEAR: tuple[int, ...] = tuple(
    accumulate((year_length(y) for y in range(MIN_YEAR, MAX_YEAR + 1)), initial=0)
)


def days_before_year(year: int) -> int:
    """Return the day offset of Farvardin 1st of ``year`` from the epoch."""

    if not MIN_YEAR <= year <= MAX_YEAR + 1:
        raise ValueError("year out of range")
    return _DAYS_BEFORE_YEAR[year - MIN_YEAR]


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in ``year`` preceding ``month``."""

    if not 1 <= month <= 12:
        raise ValueError("month out of range")
    return sum(month_lengths(year)[: month - 1])


def month_day_from_offset(year: int, offset: int) -> tuple[int, int]:
    """Resolve a 0-based day offset within ``year`` to ``(month, day)``.

    Walks the month-length table of ``year``.
    """

    if not 0 <= offset < year_length(year):
        raise ValueError("day offset out of range")
    remaining = offset
    for month, length in enumerate(month_lengths(year), start=1):
        if remaining < length:
            return month, remaining + 1
        remaining -= length
    raise ValueError("day offset out of range")  # pragma: no cover


def month_name(month: int) -> str | None:
    """Return the Persian name of ``month`` or None for an invalid month."""

    if 1 <= month <= 12:
        return MONTH_NAMES_PERSIAN[month - 1]
    return None
