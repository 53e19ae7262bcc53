from __future__ import annotations

from rest_framework import serializers

from . import conf
from .dates import PersianDate
from .datetimes import PersianDateTime
from .errors import DateParseError
from .utils import to_latin_digits


class PersianDateField(serializers.Field):
    """Represent a :class:`PersianDate` as text in the configured pattern."""

    value_class = PersianDate
    default_error_messages = {
        "invalid": "Value does not match {pattern} ({kind}).",
        "type": "Expected a string, got {type}.",
    }

    def __init__(self, *, pattern: str | None = None, **kwargs):
        self.pattern = pattern or self.default_pattern()
        super().__init__(**kwargs)

    def default_pattern(self) -> str:
        return conf.DATE_FORMAT

    def to_representation(self, value):
        return value.format(self.pattern)

    def to_internal_value(self, data):
        if isinstance(data, self.value_class):
            return data
        if not isinstance(data, str):
            self.fail("type", type=type(data).__name__)
        try:
            return self.value_class.parse(to_latin_digits(data.strip()), self.pattern)
        except DateParseError as exc:
            self.fail("invalid", pattern=self.pattern, kind=exc.kind.value)


class PersianDateTimeField(PersianDateField):
    value_class = PersianDateTime

    def default_pattern(self) -> str:
        return conf.DATETIME_FORMAT
