"""The :class:`PersianDateTime` value type.

A Persian date combined with a time of day at one-second resolution.
Date arithmetic delegates to :class:`PersianDate` and keeps the time;
duration arithmetic goes through ``datetime.datetime`` so that rollover
across every unit is handled by the standard library.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .dates import PersianDate
from .errors import (
    ArithmeticOverflowError,
    DateParseError,
    InvalidDateError,
    InvalidTimeError,
    ParseErrorKind,
)
from .formatting import format_value, parse_fields, require_fields
from .seasons import Season


def _time_is_valid(hour: int, minute: int, second: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


@dataclass(frozen=True, order=True)
class PersianDateTime:
    """A Persian date and a 24-hour wall-clock time.

    ``PersianDateTime(date, hour, minute, second)`` validates both parts:
    an invalid date raises :class:`InvalidDateError`, an invalid time
    :class:`InvalidTimeError`.  Use :meth:`from_parts` to build from
    plain numbers.
    """

    date: PersianDate
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not self.date.is_valid():
            raise InvalidDateError()
        if not _time_is_valid(self.hour, self.minute, self.second):
            raise InvalidTimeError(f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} is not a valid time")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_parts(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
    ) -> PersianDateTime:
        return cls(PersianDate(year, month, day), hour, minute, second)

    @classmethod
    def from_unchecked_parts(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
    ) -> PersianDateTime:
        """Build without validation; see :meth:`PersianDate.from_unchecked_parts`."""

        obj = object.__new__(cls)
        object.__setattr__(obj, "date", PersianDate.from_unchecked_parts(year, month, day))
        object.__setattr__(obj, "hour", hour)
        object.__setattr__(obj, "minute", minute)
        object.__setattr__(obj, "second", second)
        return obj

    @classmethod
    def from_gregorian(cls, gregorian: dt.datetime) -> PersianDateTime:
        """Convert a ``datetime`` (its wall-clock fields).

        Microseconds are dropped.  A plain ``date`` is taken as midnight.
        """

        if not isinstance(gregorian, dt.datetime):
            gregorian = dt.datetime.combine(gregorian, dt.time())
        date = PersianDate.from_gregorian(gregorian.date())
        return cls(date, gregorian.hour, gregorian.minute, gregorian.second)

    @classmethod
    def now(cls) -> PersianDateTime:
        """Return the current local date and time."""

        return cls.from_gregorian(dt.datetime.now())

    @classmethod
    def parse(cls, text: str, pattern: str) -> PersianDateTime:
        """Parse ``text`` with ``pattern``; every field must be captured."""

        fields = parse_fields(text, pattern, with_time=True)
        year, month, day, hour, minute, second = require_fields(
            fields, ("year", "month", "day", "hour", "minute", "second")
        )
        try:
            date = PersianDate(year, month, day)
        except InvalidDateError as exc:
            raise DateParseError(ParseErrorKind.INVALID_DATE_VALUE) from exc
        try:
            return cls(date, hour, minute, second)
        except InvalidTimeError as exc:
            raise DateParseError(ParseErrorKind.INVALID_TIME_VALUE) from exc

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def time(self) -> tuple[int, int, int]:
        return self.hour, self.minute, self.second

    def is_valid(self) -> bool:
        return self.date.is_valid() and _time_is_valid(self.hour, self.minute, self.second)

    def _check(self) -> None:
        if not self.date.is_valid():
            raise InvalidDateError()
        if not _time_is_valid(self.hour, self.minute, self.second):
            raise InvalidTimeError()

    def _replace_date(self, date: PersianDate) -> PersianDateTime:
        return PersianDateTime(date, self.hour, self.minute, self.second)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_gregorian(self) -> dt.datetime:
        """Return the equivalent naive ``datetime``."""

        self._check()
        return dt.datetime.combine(
            self.date.to_gregorian(), dt.time(self.hour, self.minute, self.second)
        )

    # ------------------------------------------------------------------
    # Date-derived values
    # ------------------------------------------------------------------
    def weekday(self) -> str:
        return self.date.weekday()

    def weekday_number(self) -> int:
        return self.date.weekday_number()

    def ordinal(self) -> int:
        return self.date.ordinal()

    def week_of_year(self) -> int:
        return self.date.week_of_year()

    def season(self) -> Season:
        return self.date.season()

    def start_of_season(self) -> PersianDateTime:
        return self._replace_date(self.date.start_of_season())

    def end_of_season(self) -> PersianDateTime:
        return self._replace_date(self.date.end_of_season())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add_duration(self, duration: dt.timedelta) -> PersianDateTime:
        """Shift by an exact duration, rolling over every unit as needed."""

        self._check()
        start = self.to_gregorian()
        try:
            target = start + duration
        except OverflowError as exc:
            raise ArithmeticOverflowError() from exc
        return PersianDateTime.from_gregorian(target)

    def sub_duration(self, duration: dt.timedelta) -> PersianDateTime:
        return self.add_duration(-duration)

    def add_days(self, days: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.add_days(days))

    def sub_days(self, days: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.sub_days(days))

    def add_months(self, months: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.add_months(months))

    def sub_months(self, months: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.sub_months(months))

    def add_years(self, years: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.add_years(years))

    def sub_years(self, years: int) -> PersianDateTime:
        self._check()
        return self._replace_date(self.date.sub_years(years))

    def __add__(self, other: object) -> PersianDateTime:
        if isinstance(other, dt.timedelta):
            return self.add_duration(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, dt.timedelta):
            return self.sub_duration(other)
        if isinstance(other, PersianDateTime):
            return self.to_gregorian() - other.to_gregorian()
        return NotImplemented

    # ------------------------------------------------------------------
    # Field replacement
    # ------------------------------------------------------------------
    def with_year(self, year: int) -> PersianDateTime:
        return self._replace_date(self.date.with_year(year))

    def with_month(self, month: int) -> PersianDateTime:
        return self._replace_date(self.date.with_month(month))

    def with_day(self, day: int) -> PersianDateTime:
        return self._replace_date(self.date.with_day(day))

    def with_hour(self, hour: int) -> PersianDateTime:
        return self.with_time(hour, self.minute, self.second)

    def with_minute(self, minute: int) -> PersianDateTime:
        return self.with_time(self.hour, minute, self.second)

    def with_second(self, second: int) -> PersianDateTime:
        return self.with_time(self.hour, self.minute, second)

    def with_time(self, hour: int, minute: int, second: int) -> PersianDateTime:
        # the original date must be valid even though only the time changes
        if not self.date.is_valid():
            raise InvalidDateError()
        return PersianDateTime(self.date, hour, minute, second)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format(self, pattern: str) -> str:
        return format_value(self, pattern, with_time=True)

    def __str__(self) -> str:
        return f"{self.date} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"

