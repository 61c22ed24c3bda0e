"""Cart services: inventory-clamped mutations and checkout."""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from inventory.models import StockMovement
from inventory.services import MovementError, apply_movement

from .models import Cart, LineItem
from .selectors import get_line_item


class CartError(Exception):
    """Raised for cart mutation failures."""


class CheckoutError(CartError):
    """Raised when a cart cannot be converted into an order."""


logger = logging.getLogger("shopcart.cart")


def initial_quantity(*, item, quantity: int) -> int:
    """Quantity for a new line item: `quantity`, capped at the item's inventory."""

    return quantity if item.is_inventory_available(quantity) else int(item.inventory)


def increment_quantity(*, line_item: LineItem, item, quantity: int) -> int:
    """Quantity for an existing line item grown by `quantity`, capped at inventory."""

    candidate = int(line_item.quantity) + quantity
    return candidate if item.is_inventory_available(candidate) else int(item.inventory)


def set_quantity(line_item: LineItem | None, item, quantity: int) -> int:
    """Clamp a requested quantity against the item's inventory.

    With a line item, `quantity` is an increment on top of what the line
    already holds; without one, it is the absolute quantity for a new line.
    """

    if line_item is not None:
        return increment_quantity(line_item=line_item, item=item, quantity=quantity)
    return initial_quantity(item=item, quantity=quantity)


def create_cart(*, user) -> tuple[Cart, list[str]]:
    """Validate and persist a cart for `user`.

    Returns the cart and a list of validation messages. When the list is not
    empty the cart was not saved.
    """

    cart = Cart(user=user)
    try:
        cart.full_clean()
    except ValidationError as exc:
        return cart, exc.messages
    cart.save()
    return cart, []


@transaction.atomic
def add_item(*, cart: Cart, item, quantity: int) -> LineItem | None:
    """Add `quantity` of `item` to the cart, merging into an existing line.

    Requests above the item's inventory are capped rather than rejected;
    only a non-positive `quantity` is refused with CartError. Items with no
    inventory are skipped and None is returned.
    """

    if quantity <= 0:
        raise CartError("Quantity must be positive")
    if int(item.inventory) == 0:
        logger.info(
            "cart.item_skipped",
            extra={"event": "cart.item_skipped", "cart_id": cart.id, "item_id": item.id, "reason": "out_of_stock"},
        )
        return None

    line_item = get_line_item(cart=cart, item=item)
    if line_item is not None:
        line_item.quantity = increment_quantity(line_item=line_item, item=item, quantity=quantity)
        line_item.save(update_fields=["quantity", "updated_at"])
        event = "cart.item_updated"
    else:
        line_item = LineItem.objects.create(
            cart=cart,
            item=item,
            quantity=initial_quantity(item=item, quantity=quantity),
        )
        event = "cart.item_added"
    logger.info(
        event,
        extra={
            "event": event,
            "cart_id": cart.id,
            "user_id": cart.user_id,
            "item_id": item.id,
            "requested": quantity,
            "quantity": line_item.quantity,
        },
    )
    return line_item


@transaction.atomic
def checkout(*, cart: Cart, decrement_inventory: bool | None = None):
    """Convert the cart's line items into an order and empty the cart.

    `decrement_inventory` defaults to the CART_CHECKOUT_DECREMENTS_INVENTORY
    setting. When enabled, each line's quantity is drawn from its item's
    inventory and a shortfall aborts the whole checkout.

    An empty cart still yields an order, one with no order items.

    Returns the created order.
    """

    from orders.services import create_order_from_cart

    if decrement_inventory is None:
        decrement_inventory = getattr(settings, "CART_CHECKOUT_DECREMENTS_INVENTORY", True)

    lines = list(LineItem.objects.select_for_update().filter(cart=cart).order_by("id"))

    order = create_order_from_cart(cart)
    if decrement_inventory:
        for line in lines:
            try:
                apply_movement(
                    item_id=line.item_id,
                    movement_type=StockMovement.TYPE_OUTBOUND,
                    quantity=-int(line.quantity),
                    reason="cart checkout",
                    reference=f"cart:{cart.id}",
                )
            except MovementError as exc:
                raise CheckoutError(f"Cannot fulfil item {line.item_id}: {exc}") from exc
    LineItem.objects.filter(cart=cart).delete()
    cart.save(update_fields=["updated_at"])
    logger.info(
        "cart.checked_out",
        extra={
            "event": "cart.checked_out",
            "cart_id": cart.id,
            "user_id": cart.user_id,
            "order_id": int(order.id),
            "lines": len(lines),
            "inventory_decremented": bool(decrement_inventory),
        },
    )
    return order


@transaction.atomic
def empty_cart(*, cart: Cart) -> int:
    """Delete every line item in the cart, keeping the cart itself."""

    deleted, _ = LineItem.objects.filter(cart=cart).delete()
    logger.info("cart.cleared", extra={"event": "cart.cleared", "cart_id": cart.id, "user_id": cart.user_id})
    return deleted


@transaction.atomic
def destroy_cart(*, cart: Cart) -> None:
    """Delete the cart together with its line items."""

    cart_id = cart.id
    LineItem.objects.filter(cart=cart).delete()
    cart.delete()
    logger.info("cart.destroyed", extra={"event": "cart.destroyed", "cart_id": cart_id})
