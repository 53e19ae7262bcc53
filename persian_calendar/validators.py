"""Validators for Persian calendar dates."""

from django.core.exceptions import ValidationError

from . import core


def validate_persian_date_parts(year: int, month: int, day: int) -> None:
    """Validate numeric parts of a Persian date."""
    if not core.MIN_YEAR <= year <= core.MAX_YEAR:
        raise ValidationError(f"Year must be between {core.MIN_YEAR} and {core.MAX_YEAR}")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    max_day = core.days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise ValidationError(f"Month {month} has {max_day} days in year {year}")
