"""Django app configuration for the Cart app."""

from django.apps import AppConfig


class CartConfig(AppConfig):
    """Shopping carts, their line items and checkout."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "cart"
