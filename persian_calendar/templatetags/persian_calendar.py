import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from django import template

from .. import conf
from ..dates import PersianDate
from ..datetimes import PersianDateTime
from ..errors import DateError
from ..utils import to_persian_digits

logger = logging.getLogger(__name__)

register = template.Library()


def _digits(text: str) -> str:
    return to_persian_digits(text) if conf.PERSIAN_DIGITS else text


@register.filter
def to_persian(value, pattern=None):
    """Render a Gregorian ``date``/``datetime`` as Persian text.

    Aware datetimes are first moved to ``PERSIAN_CALENDAR_TIME_ZONE``.
    """

    if value is None:
        return ""
    try:
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(ZoneInfo(conf.TIME_ZONE))
            converted = PersianDateTime.from_gregorian(value)
            return _digits(converted.format(pattern or conf.DATETIME_FORMAT))
        if isinstance(value, date):
            return _digits(PersianDate.from_gregorian(value).format(pattern or conf.DATE_FORMAT))
    except DateError:
        logger.warning("to_persian could not convert %r", value)
    return str(value)


@register.filter
def persian_format(value, pattern=None):
    if isinstance(value, PersianDateTime):
        return _digits(value.format(pattern or conf.DATETIME_FORMAT))
    if isinstance(value, PersianDate):
        return _digits(value.format(pattern or conf.DATE_FORMAT))
    return "" if value is None else str(value)


@register.filter
def persian_digits(value):
    return "" if value is None else to_persian_digits(value)
