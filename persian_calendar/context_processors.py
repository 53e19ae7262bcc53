"""Context processors for the Persian calendar."""

import json

from . import core
from .dates import PersianDate


def persian_calendar_meta(request):
    """Expose today's Persian date and the current year's layout."""

    today = PersianDate.today()
    meta = {
        "year": today.year,
        "is_leap": core.is_persian_leap_year(today.year),
        "month_lengths": core.month_lengths(today.year),
        "month_names": list(core.MONTH_NAMES_PERSIAN),
        "weekday_names": list(core.WEEKDAY_NAMES_PERSIAN),
    }
    return {
        "PERSIAN_TODAY": today,
        "PERSIAN_CALENDAR_META": meta,
        "PERSIAN_CALENDAR_MONTH_LENGTHS_JSON": json.dumps(meta["month_lengths"]),
    }
