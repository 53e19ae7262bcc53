"""Persian calendar helper utilities.

Storage helpers write the raw fields of a value and read them back
without validation, so a stored value that has become invalid (or was
written by hand) still loads; callers check ``is_valid()`` when they care.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .dates import PersianDate
from .datetimes import PersianDateTime

logger = logging.getLogger(__name__)

_STORAGE_RE = re.compile(
    r"(-?\d+)-(\d+)-(\d+)(?:[ T](\d+):(\d+):(\d+))?",
    re.ASCII,
)

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_TO_PERSIAN = str.maketrans("0123456789", _PERSIAN_DIGITS)
_TO_LATIN = str.maketrans(_PERSIAN_DIGITS + _ARABIC_DIGITS, "0123456789" * 2)

_DATE_KEYS = ("year", "month", "day")
_TIME_KEYS = ("hour", "minute", "second")


# ---------------------------------------------------------------------------
# Storage text
# ---------------------------------------------------------------------------


def to_storage(value: PersianDate | PersianDateTime) -> str:
    """Format ``value`` as ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS``."""

    if isinstance(value, PersianDateTime):
        d = value.date
        return (
            f"{d.year:04d}-{d.month:02d}-{d.day:02d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        )
    if isinstance(value, PersianDate):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    raise TypeError(f"Cannot store {type(value).__name__} as a Persian date")


def _unchecked(parts: Iterable[Any]) -> PersianDate | PersianDateTime | None:
    numbers = [int(p) for p in parts]
    if len(numbers) == 3:
        return PersianDate.from_unchecked_parts(*numbers)
    if len(numbers) == 6:
        return PersianDateTime.from_unchecked_parts(*numbers)
    return None


def from_storage(value: Any) -> PersianDate | PersianDateTime | None:
    """Parse storage text back into a value.

    Gracefully handles ``None`` and various input types.  Returns ``None``
    when the input has the wrong shape.  Field ranges are not checked.
    """

    # Empty / nullish values -------------------------------------------------
    if value is None or value in ("", b"", "None"):
        return None

    # Already decoded ---------------------------------------------------------
    if isinstance(value, PersianDate | PersianDateTime):
        return value

    # Raw tuple/list of components -------------------------------------------
    if isinstance(value, list | tuple):
        try:
            return _unchecked(value)
        except (TypeError, ValueError):
            logger.debug("Unusable stored components %r", value)
            return None

    # Bytes -> decode to str --------------------------------------------------
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Stored bytes are not UTF-8: %r", value)
            return None

    # String in storage format -----------------------------------------------
    if isinstance(value, str):
        match = _STORAGE_RE.fullmatch(value.strip())
        if not match:
            logger.debug("Unrecognised storage text %r", value)
            return None
        return _unchecked(g for g in match.groups() if g is not None)

    logger.debug("Unsupported storage type %s", type(value).__name__)
    return None


# ---------------------------------------------------------------------------
# Dict codec
# ---------------------------------------------------------------------------


def to_dict(value: PersianDate | PersianDateTime) -> dict[str, int]:
    if isinstance(value, PersianDateTime):
        return {
            "year": value.year,
            "month": value.month,
            "day": value.day,
            "hour": value.hour,
            "minute": value.minute,
            "second": value.second,
        }
    if isinstance(value, PersianDate):
        return {"year": value.year, "month": value.month, "day": value.day}
    raise TypeError(f"Cannot serialise {type(value).__name__}")


def from_dict(data: Mapping[str, Any]) -> PersianDate | PersianDateTime:
    """Inverse of :func:`to_dict`.

    The result is a date-time when any time key is present.  Missing keys
    or non-integer values raise :class:`ValueError`.
    """

    keys = _DATE_KEYS + _TIME_KEYS if any(k in data for k in _TIME_KEYS) else _DATE_KEYS
    missing = [k for k in keys if k not in data]
    if missing:
        raise ValueError(f"Missing keys: {', '.join(missing)}")
    values = []
    for key in keys:
        raw = data[key]
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"{key} must be an integer, got {raw!r}")
        values.append(raw)
    return _unchecked(values)


# ---------------------------------------------------------------------------
# Digits
# ---------------------------------------------------------------------------


def to_persian_digits(text: Any) -> str:
    """Replace ASCII digits with Persian (Extended Arabic-Indic) digits."""

    return str(text).translate(_TO_PERSIAN)


def to_latin_digits(text: Any) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""

    return str(text).translate(_TO_LATIN)
