"""Django model fields for Persian calendar values."""

from __future__ import annotations

from datetime import date, datetime

from django.core.exceptions import ValidationError
from django.db import models

from . import conf
from .dates import PersianDate
from .datetimes import PersianDateTime
from .errors import DateError
from .forms import PersianDateFormField, PersianDateTimeFormField, parse_with_pattern
from .utils import from_storage, to_storage
from .validators import validate_persian_date_parts


class PersianDateField(models.CharField):
    """Store Persian dates as ``YYYY-MM-DD`` strings.

    Values loaded from the database are decoded without validation, so a
    bad row does not break a queryset; :meth:`to_python` (used by model
    validation and forms) is strict.
    """

    description = "Persian calendar date"
    value_class = PersianDate
    form_class = PersianDateFormField
    default_max_length = 16

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("max_length", self.default_max_length)
        super().__init__(*args, **kwargs)

    def display_pattern(self) -> str:
        return conf.DATE_FORMAT

    def _from_gregorian(self, value: date):
        return self.value_class.from_gregorian(value)

    def _validated(self, value, text: str):
        validate_persian_date_parts(value.year, value.month, value.day)
        if not value.is_valid():
            raise ValidationError(f"{text} is not a valid {self.description}")
        return value

    # ------------------------------------------------------------------
    # Django hooks
    # ------------------------------------------------------------------
    def to_python(self, value):
        if value in (None, ""):
            return None
        if isinstance(value, PersianDate | PersianDateTime):
            if not isinstance(value, self.value_class):
                raise ValidationError(f"{value} is not a valid {self.description}")
            return self._validated(value, str(value))
        if isinstance(value, date | datetime):
            try:
                return self._from_gregorian(value)
            except DateError as exc:
                raise ValidationError(str(exc)) from exc
        text = str(value)
        decoded = from_storage(text)
        if isinstance(decoded, self.value_class):
            return self._validated(decoded, text)
        return parse_with_pattern(self.value_class, text, self.display_pattern())

    def get_prep_value(self, value):
        value = self.to_python(value)
        if value is None:
            return None if self.null else ""
        return to_storage(value)

    def from_db_value(self, value, expression, connection):
        return from_storage(value)

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        return "" if value is None else to_storage(value)

    def formfield(self, **kwargs):
        defaults = {"form_class": self.form_class}
        defaults.update(kwargs)
        # skip CharField.formfield, which would force a max_length validator
        return models.Field.formfield(self, **defaults)


class PersianDateTimeField(PersianDateField):
    """Store Persian date-times as ``YYYY-MM-DD HH:MM:SS`` strings."""

    description = "Persian calendar date-time"
    value_class = PersianDateTime
    form_class = PersianDateTimeFormField
    default_max_length = 25

    def display_pattern(self) -> str:
        return conf.DATETIME_FORMAT


__all__ = ["PersianDateField", "PersianDateTimeField"]
