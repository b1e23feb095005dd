from django.apps import AppConfig


class PositionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "positions"
    verbose_name = "Positions"

    def ready(self):
        # Import signals to register them
        from positions import signals  # noqa: F401
