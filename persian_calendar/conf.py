from django.conf import settings

DATE_FORMAT = getattr(settings, "PERSIAN_CALENDAR_DATE_FORMAT", "%Y/%m/%d")
DATETIME_FORMAT = getattr(settings, "PERSIAN_CALENDAR_DATETIME_FORMAT", "%Y/%m/%d %T")
TIME_ZONE = getattr(settings, "PERSIAN_CALENDAR_TIME_ZONE", "Asia/Tehran")
PERSIAN_DIGITS = getattr(settings, "PERSIAN_CALENDAR_PERSIAN_DIGITS", False)
