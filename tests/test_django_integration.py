from datetime import date, datetime, timezone

import pytest
from django.core.exceptions import ValidationError
from django.template import Context, Template
from rest_framework import serializers

from persian_calendar import PersianDate, PersianDateTime
from persian_calendar.context_processors import persian_calendar_meta
from persian_calendar.fields import (
    PersianDateField,
    PersianDateFormField,
    PersianDateTimeField,
    PersianDateTimeFormField,
)
from persian_calendar.serializers import PersianDateField as PersianDateSerializerField
from persian_calendar.serializers import PersianDateTimeField as PersianDateTimeSerializerField
from persian_calendar.validators import validate_persian_date_parts

# --------- validators ---------


def test_validate_parts_accepts_leap_day():
    validate_persian_date_parts(1403, 12, 30)


@pytest.mark.parametrize("parts", [(0, 1, 1), (1403, 13, 1), (1402, 12, 30), (1403, 7, 31)])
def test_validate_parts_rejects(parts):
    with pytest.raises(ValidationError):
        validate_persian_date_parts(*parts)


# --------- form fields ---------


def test_form_field_clean():
    field = PersianDateFormField()
    assert field.clean("1403/01/05") == PersianDate(1403, 1, 5)
    assert field.clean(" ۱۴۰۳/۰۱/۰۵ ") == PersianDate(1403, 1, 5)
    assert field.prepare_value(PersianDate(1403, 1, 5)) == "1403/01/05"


def test_form_field_optional_empty():
    assert PersianDateFormField(required=False).clean("") is None


def test_form_field_error_names_parse_failure():
    field = PersianDateFormField()
    with pytest.raises(ValidationError) as excinfo:
        field.clean("1402/12/30")
    assert excinfo.value.code == "invalid_date_value"
    assert "invalid_date_value" in excinfo.value.messages[0]


def test_form_field_custom_pattern():
    field = PersianDateFormField(pattern="%d %B %Y")
    assert field.clean("05 فروردین 1403") == PersianDate(1403, 1, 5)


def test_datetime_form_field():
    field = PersianDateTimeFormField()
    assert field.clean("1403/01/05 10:20:30") == PersianDateTime.from_parts(1403, 1, 5, 10, 20, 30)
    with pytest.raises(ValidationError):
        field.clean("1403/01/05 24:00:00")


# --------- model fields ---------


def test_model_field_to_python():
    field = PersianDateField()
    assert field.to_python(None) is None
    assert field.to_python("1403-01-05") == PersianDate(1403, 1, 5)
    assert field.to_python("1403/01/05") == PersianDate(1403, 1, 5)
    assert field.to_python(date(2024, 3, 20)) == PersianDate(1403, 1, 1)
    assert field.to_python(PersianDate(1403, 1, 5)) == PersianDate(1403, 1, 5)


@pytest.mark.parametrize("value", ["1402-12-30", "bad", PersianDate.from_unchecked_parts(1403, 13, 1)])
def test_model_field_to_python_rejects(value):
    with pytest.raises(ValidationError):
        PersianDateField().to_python(value)


def test_model_field_prep_and_db_values():
    field = PersianDateField()
    assert field.get_prep_value(PersianDate(1403, 1, 5)) == "1403-01-05"
    assert field.get_prep_value(None) == ""
    assert PersianDateField(null=True).get_prep_value("") is None
    loaded = field.from_db_value("1403-13-01", None, None)
    assert loaded == PersianDate.from_unchecked_parts(1403, 13, 1)
    assert field.from_db_value(None, None, None) is None


def test_model_field_formfield():
    assert isinstance(PersianDateField().formfield(), PersianDateFormField)
    assert isinstance(PersianDateTimeField().formfield(), PersianDateTimeFormField)


def test_datetime_model_field():
    field = PersianDateTimeField()
    expected = PersianDateTime.from_parts(1403, 1, 1, 12, 30, 0)
    assert field.to_python("1403-01-01 12:30:00") == expected
    assert field.to_python("1403/01/01 12:30:00") == expected
    assert field.to_python(datetime(2024, 3, 20, 12, 30)) == expected
    assert field.get_prep_value(expected) == "1403-01-01 12:30:00"
    with pytest.raises(ValidationError):
        field.to_python(PersianDate(1403, 1, 1))


# --------- DRF ---------


class EventSerializer(serializers.Serializer):
    day = PersianDateSerializerField()
    starts_at = PersianDateTimeSerializerField(required=False)


def test_serializer_representation():
    data = EventSerializer({"day": PersianDate(1403, 1, 5)}).data
    assert data["day"] == "1403/01/05"


def test_serializer_parses_input():
    serializer = EventSerializer(data={"day": "1403/01/05", "starts_at": "1403/01/05 08:00:00"})
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["day"] == PersianDate(1403, 1, 5)
    assert serializer.validated_data["starts_at"] == PersianDateTime.from_parts(1403, 1, 5, 8)


def test_serializer_reports_parse_kind():
    serializer = EventSerializer(data={"day": "1403-01-05"})
    assert not serializer.is_valid()
    assert "format_mismatch" in str(serializer.errors["day"][0])


def test_serializer_rejects_non_strings():
    serializer = EventSerializer(data={"day": 14030105})
    assert not serializer.is_valid()
    assert "day" in serializer.errors


# --------- templates ---------


def render(source, **context):
    return Template("{% load persian_calendar %}" + source).render(Context(context))


def test_to_persian_filter():
    assert render("{{ d|to_persian }}", d=date(2024, 3, 20)) == "1403/01/01"
    assert render('{{ d|to_persian:"%d %B %Y" }}', d=date(2024, 3, 20)) == "01 فروردین 1403"
    aware = datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc)
    assert render("{{ d|to_persian }}", d=aware) == "1403/01/01 03:30:00"
    assert render("{{ d|to_persian }}", d=None) == ""
    assert render("{{ d|to_persian }}", d="text") == "text"


def test_to_persian_filter_before_epoch_returns_input():
    assert render("{{ d|to_persian }}", d=date(600, 1, 1)) == "0600-01-01"


def test_persian_format_and_digits_filters():
    d = PersianDate(1403, 1, 5)
    assert render("{{ d|persian_format }}", d=d) == "1403/01/05"
    assert render('{{ d|persian_format:"%Y-%m-%d" }}', d=d) == "1403-01-05"
    assert render("{{ d|persian_format|persian_digits }}", d=d) == "۱۴۰۳/۰۱/۰۵"


# --------- context processor ---------


def test_calendar_meta_context():
    context = persian_calendar_meta(None)
    today = context["PERSIAN_TODAY"]
    meta = context["PERSIAN_CALENDAR_META"]
    assert meta["year"] == today.year
    assert len(meta["month_lengths"]) == 12
    assert sum(meta["month_lengths"]) in (365, 366)
    assert meta["month_names"][0] == "فروردین"


def test_model_field_reports_month_length():
    with pytest.raises(ValidationError) as excinfo:
        PersianDateField().to_python("1402-12-30")
    assert excinfo.value.messages == ["Month 12 has 29 days in year 1402"]
    with pytest.raises(ValidationError) as excinfo:
        PersianDateTimeField().to_python(PersianDateTime.from_unchecked_parts(1403, 13, 1, 0, 0, 0))
    assert excinfo.value.messages == ["Month must be between 1 and 12"]
    with pytest.raises(ValidationError):
        PersianDateTimeField().to_python("1403-01-01 25:00:00")
