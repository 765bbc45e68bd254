from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Shared infrastructure; checks the configuration when Django starts."""

    name = "core"
    verbose_name = "Inkwell Core"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        from core.config import validate_config_on_startup
        validate_config_on_startup()
