import logging
from decimal import Decimal

from cart.models import Cart, LineItem
from django.db import transaction

from .models import Order, OrderItem

logger = logging.getLogger("shopcart.orders")


def create_order_from_cart(cart: Cart) -> Order:
    """Create an Order and OrderItems from the given cart snapshot.

    Order items follow the cart's line item insertion order and snapshot
    the item title, SKU and current price.
    """

    with transaction.atomic():
        order = Order.objects.create(user=cart.user, email=getattr(cart.user, "email", None))
        for line in LineItem.objects.select_related("item").filter(cart=cart).order_by("id"):
            OrderItem.objects.create(
                order=order,
                item=line.item,
                item_title=line.item.title,
                item_sku=line.item.sku,
                quantity=line.quantity,
                unit_price=line.item.price or Decimal("0.00"),
            )
        # Generate user-friendly order number (unique)
        order.number = f"ORD-{int(order.id):06d}"
        order.save(update_fields=["number"])
    logger.info(
        "order_created",
        extra={
            "event": "order_created",
            "order_id": order.id,
            "user_id": order.user_id,
            "number": order.number,
        },
    )
    return order
