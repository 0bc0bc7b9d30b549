from django.apps import AppConfig


class TrackerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tracker'
    verbose_name = 'Daily Wins'

    def ready(self):
        # Hook up the sign in / sign out receivers
        from . import session  # noqa: F401
