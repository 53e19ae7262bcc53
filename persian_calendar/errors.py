"""Exceptions raised by the Persian calendar core."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    FORMAT_MISMATCH = "format_mismatch"
    INVALID_NUMBER = "invalid_number"
    INVALID_DATE_VALUE = "invalid_date_value"
    INVALID_TIME_VALUE = "invalid_time_value"
    UNSUPPORTED_SPECIFIER = "unsupported_specifier"
    INVALID_MONTH_NAME = "invalid_month_name"


PARSE_ERROR_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.FORMAT_MISMATCH: "Input does not match the structure of the format string",
    ParseErrorKind.INVALID_NUMBER: "Numeric component is not made of the expected number of ASCII digits",
    ParseErrorKind.INVALID_DATE_VALUE: "Parsed year, month and day form an invalid date",
    ParseErrorKind.INVALID_TIME_VALUE: "Parsed hour, minute and second form an invalid time",
    ParseErrorKind.UNSUPPORTED_SPECIFIER: "Format specifier is not supported for parsing",
    ParseErrorKind.INVALID_MONTH_NAME: "Could not recognize a Persian month name",
}


class DateError(ValueError):
    """Base class of every error raised by the calendar core."""

    default_message = "Persian calendar error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidDateError(DateError):
    default_message = "Invalid Persian date (year 1-9999, month 1-12, day within month length)"


class InvalidTimeError(DateError):
    default_message = "Invalid time (hour 0-23, minute 0-59, second 0-59)"


class InvalidOrdinalError(DateError):
    default_message = "Invalid ordinal day (must be 1-365, or 1-366 in a leap year)"


class GregorianConversionError(DateError):
    default_message = "Gregorian conversion failed (date out of supported range)"


class ArithmeticOverflowError(DateError):
    default_message = "Date arithmetic left the supported range (years 1-9999)"


class DateParseError(DateError):
    """Raised by ``parse``; ``kind`` tells which check failed."""

    def __init__(self, kind: ParseErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or PARSE_ERROR_MESSAGES[kind])
