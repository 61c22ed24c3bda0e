"""Django app configuration for inventory."""

from django.apps import AppConfig


class InventoryConfig(AppConfig):
    """Stock movement ledger for catalog items."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "inventory"
