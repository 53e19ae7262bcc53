"""Persian (Jalali / Solar Hijri) calendar dates and times.

The core types have no Django dependency; the form, model, serializer
and template integrations live in their own modules.
"""

from .core import (
    MAX_YEAR,
    MIN_YEAR,
    MONTH_NAMES_ENGLISH,
    MONTH_NAMES_PERSIAN,
    PERSIAN_EPOCH,
    WEEKDAY_NAMES_PERSIAN,
    days_in_month,
    is_gregorian_leap_year,
    is_persian_leap_year,
)
from .dates import MAX_DATE, MIN_DATE, PersianDate
from .datetimes import PersianDateTime
from .errors import (
    ArithmeticOverflowError,
    DateError,
    DateParseError,
    GregorianConversionError,
    InvalidDateError,
    InvalidOrdinalError,
    InvalidTimeError,
    ParseErrorKind,
)
from .seasons import Season
from .zoned import LocalTimeResolver, ZonedPersianDateTime, ZoneInfoResolver

__all__ = [
    "ArithmeticOverflowError",
    "DateError",
    "DateParseError",
    "GregorianConversionError",
    "InvalidDateError",
    "InvalidOrdinalError",
    "InvalidTimeError",
    "LocalTimeResolver",
    "MAX_DATE",
    "MAX_YEAR",
    "MIN_DATE",
    "MIN_YEAR",
    "MONTH_NAMES_ENGLISH",
    "MONTH_NAMES_PERSIAN",
    "PERSIAN_EPOCH",
    "ParseErrorKind",
    "PersianDate",
    "PersianDateTime",
    "Season",
    "WEEKDAY_NAMES_PERSIAN",
    "ZoneInfoResolver",
    "ZonedPersianDateTime",
    "days_in_month",
    "is_gregorian_leap_year",
    "is_persian_leap_year",
]
