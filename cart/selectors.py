"""Selectors for read-only cart queries."""

from decimal import Decimal

from django.db.models import Sum

from .models import Cart, LineItem

CENTS = Decimal("0.01")


def get_cart_for_user(*, user) -> Cart:
    """Return the user's cart, creating it if missing."""

    cart = Cart.objects.filter(user=user).order_by("id").first()
    if cart is None:
        cart = Cart.objects.create(user=user)
    return cart


def get_line_item(*, cart: Cart, item) -> LineItem | None:
    """Return the cart's line item for `item`, if any (oldest first)."""

    return LineItem.objects.filter(cart=cart, item=item).order_by("id").first()


def cart_total(*, cart: Cart) -> Decimal:
    """Sum the price of every item linked to the cart.

    One term per linked item, not weighted by line item quantity.
    """

    agg = cart.items.aggregate(total=Sum("price"))
    total = agg.get("total") or Decimal("0.00")
    return Decimal(total).quantize(CENTS)
