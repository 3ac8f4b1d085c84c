"""
Django Cookbook app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CookbookConfig(AppConfig):
    """Cookbook application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "cookbook"
    verbose_name = _("Recipes")

    def ready(self):
        """Import signal handlers when app is ready."""
        from cookbook.signals import handlers  # noqa: F401
