from django.apps import AppConfig


class PersianCalendarConfig(AppConfig):
    name = "persian_calendar"
    verbose_name = "Persian calendar"
