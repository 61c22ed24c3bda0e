"""Cart app models.

A cart belongs to one user and holds line items, each pairing an item with
a quantity. Items are also reachable directly through `Cart.items`.
"""

from decimal import Decimal

from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model adding created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Cart(TimeStampedModel):
    """Shopping cart bound to a user.

    The cart row outlives checkout; only its line items are cleared.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name="carts",
        on_delete=models.CASCADE,
        error_messages={"null": "User must exist", "blank": "User must exist"},
    )
    items = models.ManyToManyField("catalog.Item", through="LineItem", related_name="carts")

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Cart#{self.id} ({self.user_id})"

    @property
    def total(self) -> Decimal:
        from .selectors import cart_total

        return cart_total(cart=self)


class LineItem(TimeStampedModel):
    """Quantity of one catalog item held in a cart."""

    cart = models.ForeignKey(Cart, related_name="line_items", on_delete=models.CASCADE)
    item = models.ForeignKey("catalog.Item", related_name="line_items", on_delete=models.CASCADE)
    quantity = models.PositiveIntegerField(default=1)

    class Meta:
        # Insertion order; checkout maps line items to order items in this order
        ordering = ["id"]
        indexes = [
            models.Index(fields=["cart", "item"], name="lineitem_cart_item_idx"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"LineItem#{self.id} cart={self.cart_id} item={self.item_id} qty={self.quantity}"
