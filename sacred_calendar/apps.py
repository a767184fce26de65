from django.apps import AppConfig


class SacredCalendarConfig(AppConfig):
    name = "sacred_calendar"
    verbose_name = "Sacred calendar"
    default_auto_field = "django.db.models.BigAutoField"
