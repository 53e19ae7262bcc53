"""Time-zone aware Persian date-times.

:class:`ZonedPersianDateTime` holds one absolute instant (an aware
``datetime``).  The Persian wall-clock fields are derived from it on
demand, and equality and ordering compare instants, not wall clocks.

Turning a local wall-clock time into an instant is delegated to a
:class:`LocalTimeResolver`.  Ambiguous times (clocks turned back) resolve
to the earlier instant; non-existent times (clocks turned forward) raise
:class:`InvalidTimeError`.
"""

from __future__ import annotations

import datetime as dt
import functools
from abc import ABC, abstractmethod

from .dates import PersianDate
from .datetimes import PersianDateTime
from .errors import (
    ArithmeticOverflowError,
    DateError,
    GregorianConversionError,
    InvalidTimeError,
)


class LocalTimeResolver(ABC):
    """Resolve a naive local ``datetime`` in a zone to absolute instants."""

    @abstractmethod
    def resolve(self, local: dt.datetime, tz: dt.tzinfo) -> list[dt.datetime]:
        """Return zero, one or two aware datetimes for ``local`` in ``tz``."""


class ZoneInfoResolver(LocalTimeResolver):
    """Resolver for PEP 495 zones such as ``zoneinfo.ZoneInfo``.

    Both ``fold`` values are tried; a candidate counts only if it survives
    a round trip through UTC with the same wall-clock fields.
    """

    def resolve(self, local: dt.datetime, tz: dt.tzinfo) -> list[dt.datetime]:
        naive = local.replace(tzinfo=None)
        instants: dict[dt.datetime, dt.datetime] = {}
        for fold in (0, 1):
            candidate = naive.replace(tzinfo=tz, fold=fold)
            try:
                utc = candidate.astimezone(dt.timezone.utc)
                round_trip = utc.astimezone(tz)
            except OverflowError as exc:
                raise GregorianConversionError(f"{naive} in {tz} is outside the supported range") from exc
            if round_trip.replace(tzinfo=None, fold=0) == naive:
                instants.setdefault(utc, candidate)
        return [instants[utc] for utc in sorted(instants)]


DEFAULT_RESOLVER: LocalTimeResolver = ZoneInfoResolver()


def _elapsed(instant: dt.datetime) -> dt.timedelta:
    # position on the UTC time line; honours fold and cannot overflow
    return instant.replace(tzinfo=None) - dt.datetime.min - instant.utcoffset()


@functools.total_ordering
class ZonedPersianDateTime:
    __slots__ = ("_instant",)

    def __init__(self, instant: dt.datetime):
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("ZonedPersianDateTime needs an aware datetime")
        self._instant = instant

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        tz: dt.tzinfo,
        resolver: LocalTimeResolver | None = None,
    ) -> ZonedPersianDateTime:
        """Build from Persian wall-clock fields in ``tz``."""

        local = PersianDateTime.from_parts(year, month, day, hour, minute, second).to_gregorian()
        instants = (resolver or DEFAULT_RESOLVER).resolve(local, tz)
        if not instants:
            raise InvalidTimeError(f"{local} does not exist in {tz}")
        return cls(min(instants, key=_elapsed))

    @classmethod
    def now(cls, tz: dt.tzinfo) -> ZonedPersianDateTime:
        return cls(dt.datetime.now(tz))

    @classmethod
    def from_gregorian(cls, instant: dt.datetime) -> ZonedPersianDateTime:
        return cls(instant)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    def to_gregorian(self) -> dt.datetime:
        return self._instant

    def datetime(self) -> PersianDateTime:
        return PersianDateTime.from_gregorian(self._instant.replace(tzinfo=None))

    def date(self) -> PersianDate:
        return self.datetime().date

    @property
    def year(self) -> int:
        return self.date().year

    @property
    def month(self) -> int:
        return self.date().month

    @property
    def day(self) -> int:
        return self.date().day

    @property
    def hour(self) -> int:
        return self.datetime().hour

    @property
    def minute(self) -> int:
        return self.datetime().minute

    @property
    def second(self) -> int:
        return self.datetime().second

    @property
    def timezone(self) -> dt.tzinfo:
        return self._instant.tzinfo

    @property
    def offset(self) -> dt.timedelta:
        return self._instant.utcoffset()

    def with_timezone(self, tz: dt.tzinfo) -> ZonedPersianDateTime:
        """Same instant seen from another zone."""

        try:
            return ZonedPersianDateTime(self._instant.astimezone(tz))
        except OverflowError as exc:
            raise GregorianConversionError(f"{self._instant!r} cannot be shown in {tz}") from exc

    def format(self, pattern: str) -> str:
        return self.datetime().format(pattern)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add_duration(self, duration: dt.timedelta) -> ZonedPersianDateTime:
        """Shift by elapsed time; the wall clock may jump across DST changes."""

        try:
            utc = self._instant.astimezone(dt.timezone.utc)
            shifted = (utc + duration).astimezone(self._instant.tzinfo)
        except OverflowError as exc:
            raise ArithmeticOverflowError() from exc
        return ZonedPersianDateTime(shifted)

    def sub_duration(self, duration: dt.timedelta) -> ZonedPersianDateTime:
        return self.add_duration(-duration)

    def __add__(self, other: object) -> ZonedPersianDateTime:
        if isinstance(other, dt.timedelta):
            return self.add_duration(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, dt.timedelta):
            return self.sub_duration(other)
        if isinstance(other, ZonedPersianDateTime):
            return _elapsed(self._instant) - _elapsed(other._instant)
        return NotImplemented

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedPersianDateTime):
            return NotImplemented
        return _elapsed(self._instant) == _elapsed(other._instant)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedPersianDateTime):
            return NotImplemented
        return _elapsed(self._instant) < _elapsed(other._instant)

    def __hash__(self) -> int:
        return hash(_elapsed(self._instant))

    def __str__(self) -> str:
        seconds = int(self.offset.total_seconds())
        sign = "-" if seconds < 0 else "+"
        hours, rest = divmod(abs(seconds), 3600)
        return f"{self.datetime()} {sign}{hours:02d}:{rest // 60:02d}"

    def __repr__(self) -> str:
        try:
            local = str(self.datetime())
        except DateError:
            return f"ZonedPersianDateTime({self._instant!r})"
        return f"ZonedPersianDateTime({local}, tz={self.timezone!r})"
