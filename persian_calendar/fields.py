"""Convenience imports for Persian calendar fields."""

from .forms import PersianDateFormField, PersianDateTimeFormField
from .model_fields import PersianDateField, PersianDateTimeField

__all__ = [
    "PersianDateField",
    "PersianDateFormField",
    "PersianDateTimeField",
    "PersianDateTimeFormField",
]
