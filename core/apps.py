"""
Core app: shared exceptions, repository/service bases and startup checks.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Mailtrack core"

    def ready(self):
        from core.config import validate_config_on_startup
        from mailtrack.config import get_config

        validate_config_on_startup(get_config())
