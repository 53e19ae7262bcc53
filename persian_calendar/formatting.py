"""strftime-like formatting and strict parsing of Persian dates.

Both directions share one specifier grammar:

====  =====================================  =================
Spec  Meaning                                Parse
====  =====================================  =================
%Y    year, unpadded                         exactly 4 digits
%m    month, 2 digits                        exactly 2 digits
%d    day, 2 digits                          exactly 2 digits
%B    Persian month name                     prefix match
%A    Persian weekday name                   unsupported
%w    weekday number, Saturday = 0           unsupported
%j    day of year, 3 digits                  unsupported
%K    Persian season name                    unsupported
%H    hour, 2 digits (date-time only)        exactly 2 digits
%M    minute, 2 digits (date-time only)      exactly 2 digits
%S    second, 2 digits (date-time only)      exactly 2 digits
%T    ``%H:%M:%S`` (date-time only)          ``HH:MM:SS``
%%    literal ``%``                          literal ``%``
====  =====================================  =================

Formatting never fails: values needing a calculation that can fail are
rendered as placeholder tokens instead.  Parsing is a single greedy pass
over the UTF-8 bytes of the input and raises :class:`DateParseError`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .core import MONTH_NAMES_PERSIAN, month_name
from .errors import DateError, DateParseError, ParseErrorKind

INVALID_MONTH_TOKEN = "?InvalidMonth?"

# spec -> (calculation, rendering, placeholder on failure)
_DERIVED: dict[str, tuple[Callable[[Any], Any], Callable[[Any], str], str]] = {
    "A": (lambda v: v.weekday(), str, "?WeekdayError?"),
    "w": (lambda v: v.weekday_number(), str, "?"),
    "j": (lambda v: v.ordinal(), lambda n: f"{n:03d}", "???"),
    "K": (lambda v: v.season(), lambda s: s.name_persian, "?SeasonError?"),
}

_DATE_NUMBERS = {"m": "month", "d": "day"}
_TIME_NUMBERS = {"H": "hour", "M": "minute", "S": "second"}

_PERCENT = ord("%")
_COLON = ord(":")

# --------- formatting ---------


def format_value(value: Any, pattern: str, *, with_time: bool = False) -> str:
    """Render ``value`` according to ``pattern``.

    ``value`` is a :class:`PersianDate` or, with ``with_time``, a
    :class:`PersianDateTime`.  Unknown specifiers and a trailing ``%``
    are copied unchanged.
    """

    out: list[str] = []
    cache: dict[str, str] = {}
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch != "%":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            out.append("%")
            break
        spec = pattern[i + 1]
        i += 2
        out.append(_render(value, spec, with_time, cache))
    return "".join(out)


def _render(value: Any, spec: str, with_time: bool, cache: dict[str, str]) -> str:
    if spec == "%":
        return "%"
    if spec == "Y":
        return str(value.year)
    if spec == "m":
        return f"{value.month:02d}"
    if spec == "d":
        return f"{value.day:02d}"
    if spec == "B":
        return month_name(value.month) or INVALID_MONTH_TOKEN
    if spec in _DERIVED:
        # computed at most once per call
        if spec not in cache:
            calc, render, placeholder = _DERIVED[spec]
            try:
                cache[spec] = render(calc(value))
            except DateError:
                cache[spec] = placeholder
        return cache[spec]
    if with_time:
        if spec in _TIME_NUMBERS:
            return f"{getattr(value, _TIME_NUMBERS[spec]):02d}"
        if spec == "T":
            return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    return "%" + spec


# --------- parsing ---------


def parse_fields(text: str, pattern: str, *, with_time: bool = False) -> dict[str, int]:
    """Match ``text`` against ``pattern`` and return the captured fields.

    Keys are ``year``, ``month``, ``day`` and, with ``with_time``,
    ``hour``, ``minute`` and ``second``.  Only fields whose specifier
    occurs in the pattern are present.
    """

    data = text.encode("utf-8")
    fmt = pattern.encode("utf-8")
    fields: dict[str, int] = {}
    pos = 0
    i = 0
    while i < len(fmt):
        if fmt[i] != _PERCENT:
            if pos >= len(data) or data[pos] != fmt[i]:
                raise DateParseError(ParseErrorKind.FORMAT_MISMATCH)
            pos += 1
            i += 1
            continue
        if i + 1 >= len(fmt):
            raise DateParseError(ParseErrorKind.FORMAT_MISMATCH)
        spec = chr(fmt[i + 1])
        i += 2

        if spec == "%":
            if pos >= len(data) or data[pos] != _PERCENT:
                raise DateParseError(ParseErrorKind.FORMAT_MISMATCH)
            pos += 1
        elif spec == "Y":
            fields["year"] = _read_number(data, pos, 4)
            pos += 4
        elif spec in _DATE_NUMBERS:
            fields[_DATE_NUMBERS[spec]] = _read_number(data, pos, 2)
            pos += 2
        elif with_time and spec in _TIME_NUMBERS:
            fields[_TIME_NUMBERS[spec]] = _read_number(data, pos, 2)
            pos += 2
        elif with_time and spec == "T":
            fields.update(_read_clock(data, pos))
            pos += 8
        elif spec == "B":
            month, consumed = _read_month_name(data, pos)
            fields["month"] = month
            pos += consumed
        else:
            raise DateParseError(ParseErrorKind.UNSUPPORTED_SPECIFIER)

    if pos != len(data):
        raise DateParseError(ParseErrorKind.FORMAT_MISMATCH)
    return fields


def require_fields(fields: dict[str, int], names: Iterable[str]) -> tuple[int, ...]:
    """Return the values of ``names``; a missing field is a format mismatch."""

    try:
        return tuple(fields[name] for name in names)
    except KeyError:
        raise DateParseError(ParseErrorKind.FORMAT_MISMATCH) from None


def _is_ascii_digits(chunk: bytes) -> bool:
    return all(0x30 <= b <= 0x39 for b in chunk)


def _read_number(data: bytes, pos: int, width: int) -> int:
    chunk = data[pos : pos + width]
    if len(chunk) < width or not _is_ascii_digits(chunk):
        raise DateParseError(ParseErrorKind.INVALID_NUMBER)
    return int(chunk)


def _read_clock(data: bytes, pos: int) -> dict[str, int]:
    chunk = data[pos : pos + 8]
    if (
        len(chunk) < 8
        or chunk[2] != _COLON
        or chunk[5] != _COLON
        or not _is_ascii_digits(chunk[0:2] + chunk[3:5] + chunk[6:8])
    ):
        raise DateParseError(ParseErrorKind.FORMAT_MISMATCH)
    return {
        "hour": int(chunk[0:2]),
        "minute": int(chunk[3:5]),
        "second": int(chunk[6:8]),
    }


def _read_month_name(data: bytes, pos: int) -> tuple[int, int]:
    try:
        rest = data[pos:].decode("utf-8")
    except UnicodeDecodeError:
        raise DateParseError(ParseErrorKind.INVALID_MONTH_NAME) from None
    for index, name in enumerate(MONTH_NAMES_PERSIAN):
        if rest.startswith(name):
            return index + 1, len(name.encode("utf-8"))
    raise DateParseError(ParseErrorKind.INVALID_MONTH_NAME)
