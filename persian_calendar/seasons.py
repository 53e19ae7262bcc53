"""Persian seasons.

Each season covers three consecutive months: Bahar (1-3), Tabestan (4-6),
Paeez (7-9) and Zemestan (10-12).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .core import SEASON_NAMES_ENGLISH, SEASON_NAMES_PERSIAN
from .errors import InvalidDateError

if TYPE_CHECKING:  # pragma: no cover
    from .dates import PersianDate


class Season(Enum):
    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3

    @property
    def name_persian(self) -> str:
        return SEASON_NAMES_PERSIAN[self.value]

    @property
    def name_english(self) -> str:
        return SEASON_NAMES_ENGLISH[self.value]

    @property
    def start_month(self) -> int:
        return self.value * 3 + 1

    @property
    def end_month(self) -> int:
        return self.value * 3 + 3

    def __str__(self) -> str:
        return self.name_persian


def season_of(month: int) -> Season:
    """Return the season containing ``month`` (1-12)."""

    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month {month} is outside 1-12")
    return Season((month - 1) // 3)


def start_of_season(d: PersianDate) -> PersianDate:
    """Return the first day of the season ``d`` falls in."""

    if not d.is_valid():
        raise InvalidDateError()
    season = season_of(d.month)
    return d.with_day(1).with_month(season.start_month)


def end_of_season(d: PersianDate) -> PersianDate:
    """Return the last day of the season ``d`` falls in.

    For Zemestan this is Esfand 30th in a leap year and Esfand 29th
    otherwise.
    """

    if not d.is_valid():
        raise InvalidDateError()
    season = season_of(d.month)
    return d.with_day(1).with_month(season.end_month).last_day_of_month()
