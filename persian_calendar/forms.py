from __future__ import annotations

import logging

from django import forms

from . import conf
from .dates import PersianDate
from .datetimes import PersianDateTime
from .errors import DateParseError
from .utils import to_latin_digits

logger = logging.getLogger(__name__)


def parse_with_pattern(cls, value: str, pattern: str):
    """Parse ``value`` with ``cls.parse``; failures become ``ValidationError``.

    Persian digits typed by the user are accepted.
    """

    try:
        return cls.parse(to_latin_digits(value.strip()), pattern)
    except DateParseError as exc:
        logger.debug("Rejected %r for pattern %r: %s", value, pattern, exc.kind.value)
        raise forms.ValidationError(
            f"Enter a date matching {pattern} ({exc.kind.value}).",
            code=exc.kind.value,
        ) from exc


class PersianDateFormField(forms.Field):
    """Text field for a Persian date.

    ``clean()`` returns a :class:`PersianDate` or ``None`` for empty input.
    """

    value_class = PersianDate

    def __init__(self, *args, pattern: str | None = None, **kwargs):
        self.pattern = pattern or self.default_pattern()
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": self.pattern}))
        super().__init__(*args, **kwargs)

    @staticmethod
    def default_pattern() -> str:
        return conf.DATE_FORMAT

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, self.value_class):
            return value
        return parse_with_pattern(self.value_class, str(value), self.pattern)

    def prepare_value(self, value):
        if isinstance(value, self.value_class):
            return value.format(self.pattern)
        return value


class PersianDateTimeFormField(PersianDateFormField):
    """Text field for a Persian date-time; ``clean()`` returns :class:`PersianDateTime`."""

    value_class = PersianDateTime

    @staticmethod
    def default_pattern() -> str:
        return conf.DATETIME_FORMAT
