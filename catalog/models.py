"""Catalog app models.

`Item` is the purchasable unit. It owns the canonical stock count that
carts clamp against and checkout draws down.
"""

from decimal import Decimal

from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model adding created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Item(TimeStampedModel):
    """Sellable item with a price and an on-hand inventory count."""

    title = models.CharField(max_length=200)
    sku = models.CharField(max_length=64, unique=True)
    price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    inventory = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["title"]
        constraints = [
            models.CheckConstraint(name="item_price_non_negative", condition=models.Q(price__gte=0)),
            models.CheckConstraint(name="item_inventory_non_negative", condition=models.Q(inventory__gte=0)),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} [{self.sku}]"

    def is_inventory_available(self, quantity: int) -> bool:
        """Return True when `quantity` units can be taken from current stock."""
        return int(quantity) <= int(self.inventory)
