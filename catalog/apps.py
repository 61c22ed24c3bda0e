"""Django app configuration for catalog."""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """Sellable items and their on-hand inventory."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
