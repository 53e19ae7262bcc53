"""The :class:`PersianDate` value type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from . import core
from .errors import (
    ArithmeticOverflowError,
    DateParseError,
    GregorianConversionError,
    InvalidDateError,
    InvalidOrdinalError,
    ParseErrorKind,
)
from .formatting import format_value, parse_fields, require_fields
from .seasons import Season, end_of_season, season_of, start_of_season

logger = logging.getLogger(__name__)

# Upper bound for the year search in ``from_gregorian``.
_MAX_YEAR_SEARCH_STEPS = core.MAX_YEAR - core.MIN_YEAR + 2


def _start_of_year(year: int) -> date | None:
    """Gregorian date of Farvardin 1st of ``year``, None past ``date.max``."""

    try:
        return core.PERSIAN_EPOCH + timedelta(days=core.days_before_year(year))
    except OverflowError:
        return None


@dataclass(frozen=True, order=True)
class PersianDate:
    """A day of the Persian calendar.

    ``PersianDate(year, month, day)`` validates its arguments and raises
    :class:`InvalidDateError`.  Instances are immutable; every "change"
    returns a new instance.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not self.is_valid():
            raise InvalidDateError(f"{self.year}/{self.month}/{self.day} is not a valid Persian date")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_unchecked_parts(cls, year: int, month: int, day: int) -> PersianDate:
        """Build a date without validation.

        The caller guarantees the parts form a valid date.  Operations on
        an instance that breaks the invariant have undefined results; use
        :meth:`is_valid` to check after the fact.
        """

        obj = object.__new__(cls)
        object.__setattr__(obj, "year", year)
        object.__setattr__(obj, "month", month)
        object.__setattr__(obj, "day", day)
        return obj

    @classmethod
    def from_ordinal(cls, year: int, ordinal: int) -> PersianDate:
        """Return the ``ordinal``-th day (1-based) of ``year``."""

        if not 1 <= ordinal <= core.year_length(year):
            raise InvalidOrdinalError(f"Ordinal {ordinal} is outside year {year}")
        month, day = core.month_day_from_offset(year, ordinal - 1)
        return cls(year, month, day)

    @classmethod
    def from_gregorian(cls, gregorian: date) -> PersianDate:
        """Convert a Gregorian ``date`` (or the date part of a ``datetime``)."""

        if isinstance(gregorian, datetime):
            gregorian = gregorian.date()
        if gregorian < core.PERSIAN_EPOCH:
            logger.debug("Gregorian date %s precedes the Persian epoch", gregorian)
            raise GregorianConversionError(f"{gregorian} precedes the Persian epoch {core.PERSIAN_EPOCH}")

        days_since_epoch = (gregorian - core.PERSIAN_EPOCH).days
        year = min(core.MAX_YEAR, core.MIN_YEAR + days_since_epoch // 365)

        for _ in range(_MAX_YEAR_SEARCH_STEPS):
            start = _start_of_year(year)
            if start is None or start > gregorian:
                year -= 1
                if year < core.MIN_YEAR:
                    break
                continue
            if year == core.MAX_YEAR:
                return cls._from_year_offset(year, (gregorian - start).days)
            following = _start_of_year(year + 1)
            if following is None or following > gregorian:
                return cls._from_year_offset(year, (gregorian - start).days)
            year += 1

        logger.debug("Year search did not converge for %s", gregorian)
        raise GregorianConversionError(f"Could not place {gregorian} in a Persian year")

    @classmethod
    def _from_year_offset(cls, year: int, offset: int) -> PersianDate:
        if offset >= core.year_length(year):
            # only reachable past the last supported year
            raise GregorianConversionError(f"Date lies after {core.MAX_YEAR}/12/29")
        month, day = core.month_day_from_offset(year, offset)
        return cls(year, month, day)

    @classmethod
    def today(cls) -> PersianDate:
        """Return the current local date."""

        return cls.from_gregorian(date.today())

    @classmethod
    def parse(cls, text: str, pattern: str) -> PersianDate:
        """Parse ``text`` with ``pattern``; see :mod:`persian_calendar.formatting`."""

        fields = parse_fields(text, pattern)
        year, month, day = require_fields(fields, ("year", "month", "day"))
        try:
            return cls(year, month, day)
        except InvalidDateError as exc:
            raise DateParseError(ParseErrorKind.INVALID_DATE_VALUE) from exc

    # ------------------------------------------------------------------
    # Validation and conversion
    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not core.MIN_YEAR <= self.year <= core.MAX_YEAR:
            return False
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= core.days_in_month(self.year, self.month)

    def _check(self) -> None:
        if not self.is_valid():
            raise InvalidDateError()

    def to_gregorian(self) -> date:
        self._check()
        return self._to_gregorian()

    def _to_gregorian(self) -> date:
        offset = (
            core.days_before_year(self.year)
            + core.days_before_month(self.year, self.month)
            + self.day
            - 1
        )
        try:
            return core.PERSIAN_EPOCH + timedelta(days=offset)
        except OverflowError as exc:
            logger.debug("%s is beyond the Gregorian date range", self)
            raise GregorianConversionError(f"{self} is beyond {date.max}") from exc

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    def weekday_number(self) -> int:
        """Return the weekday index with Saturday as ``0``."""

        self._check()
        sunday_based = self._to_gregorian().isoweekday() % 7
        return (sunday_based + 1) % 7

    def weekday(self) -> str:
        """Return the Persian weekday name."""

        return core.WEEKDAY_NAMES_PERSIAN[self.weekday_number()]

    def ordinal(self) -> int:
        """Return the 1-based day of the year."""

        self._check()
        return core.days_before_month(self.year, self.month) + self.day

    def week_of_year(self) -> int:
        """Return the 1-based week of the year.

        Weeks start on Saturday; week 1 is the (possibly partial) week that
        contains Farvardin 1st.
        """

        self._check()
        first_weekday = self.first_day_of_year().weekday_number()
        return (self.ordinal() + first_weekday - 1) // 7 + 1

    def season(self) -> Season:
        self._check()
        return season_of(self.month)

    def start_of_season(self) -> PersianDate:
        return start_of_season(self)

    def end_of_season(self) -> PersianDate:
        return end_of_season(self)

    def days_between(self, other: PersianDate) -> int:
        """Return the absolute number of days between two dates."""

        self._check()
        other._check()
        return abs((self._to_gregorian() - other._to_gregorian()).days)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add_days(self, days: int) -> PersianDate:
        self._check()
        start = self._to_gregorian()
        try:
            target = start + timedelta(days=days)
        except OverflowError as exc:
            raise ArithmeticOverflowError() from exc
        return PersianDate.from_gregorian(target)

    def sub_days(self, days: int) -> PersianDate:
        if days < 0:
            raise ValueError("days must be non-negative")
        return self.add_days(-days)

    def add_months(self, months: int) -> PersianDate:
        """Shift by ``months`` calendar months.

        The day is clamped to the length of the target month, so
        Farvardin 31st plus six months is Mehr 30th.
        """

        self._check()
        if months == 0:
            return self
        total = self.year * 12 + (self.month - 1) + months
        year, month0 = divmod(total, 12)
        if not core.MIN_YEAR <= year <= core.MAX_YEAR:
            raise ArithmeticOverflowError()
        month = month0 + 1
        return PersianDate(year, month, min(self.day, core.days_in_month(year, month)))

    def sub_months(self, months: int) -> PersianDate:
        if months < 0:
            raise ValueError("months must be non-negative")
        return self.add_months(-months)

    def add_years(self, years: int) -> PersianDate:
        """Shift by ``years``; Esfand 30th becomes Esfand 29th in a common year."""

        self._check()
        if years == 0:
            return self
        year = self.year + years
        if not core.MIN_YEAR <= year <= core.MAX_YEAR:
            raise ArithmeticOverflowError()
        return PersianDate(year, self.month, self._clamped_leap_day(year))

    def sub_years(self, years: int) -> PersianDate:
        if years < 0:
            raise ValueError("years must be non-negative")
        return self.add_years(-years)

    def _clamped_leap_day(self, year: int) -> int:
        if self.month == 12 and self.day == 30 and not core.is_persian_leap_year(year):
            return 29
        return self.day

    # ------------------------------------------------------------------
    # Field replacement
    # ------------------------------------------------------------------
    def with_year(self, year: int) -> PersianDate:
        self._check()
        if not core.MIN_YEAR <= year <= core.MAX_YEAR:
            raise InvalidDateError(f"Year {year} is outside {core.MIN_YEAR}-{core.MAX_YEAR}")
        return PersianDate(year, self.month, self._clamped_leap_day(year))

    def with_month(self, month: int) -> PersianDate:
        self._check()
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Month {month} is outside 1-12")
        return PersianDate(self.year, month, min(self.day, core.days_in_month(self.year, month)))

    def with_day(self, day: int) -> PersianDate:
        self._check()
        return PersianDate(self.year, self.month, day)

    # Callers guarantee ``self`` is valid; checked only when assertions run.
    def first_day_of_month(self) -> PersianDate:
        assert self.is_valid(), "first_day_of_month called on an invalid date"
        return PersianDate.from_unchecked_parts(self.year, self.month, 1)

    def last_day_of_month(self) -> PersianDate:
        assert self.is_valid(), "last_day_of_month called on an invalid date"
        return PersianDate.from_unchecked_parts(
            self.year, self.month, core.days_in_month(self.year, self.month)
        )

    def first_day_of_year(self) -> PersianDate:
        assert self.is_valid(), "first_day_of_year called on an invalid date"
        return PersianDate.from_unchecked_parts(self.year, 1, 1)

    def last_day_of_year(self) -> PersianDate:
        assert self.is_valid(), "last_day_of_year called on an invalid date"
        return PersianDate.from_unchecked_parts(self.year, 12, core.days_in_month(self.year, 12))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format(self, style_or_pattern: str) -> str:
        """Format with a named style (``short``, ``long``, ``iso``) or a pattern."""

        if style_or_pattern == "short":
            return f"{self.year}/{self.month:02d}/{self.day:02d}"
        if style_or_pattern == "long":
            name = core.month_name(self.month) or "?InvalidMonth?"
            return f"{self.day} {name} {self.year}"
        if style_or_pattern == "iso":
            return f"{self.year}-{self.month:02d}-{self.day:02d}"
        return format_value(self, style_or_pattern)

    def __str__(self) -> str:
        return self.format("short")


MIN_DATE = PersianDate(core.MIN_YEAR, 1, 1)
MAX_DATE = PersianDate(core.MAX_YEAR, 12, 29)
