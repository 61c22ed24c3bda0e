"""Inventory services (single-location): transactional stock movements."""

from catalog.models import Item
from django.db import transaction

from .models import StockMovement


class MovementError(Exception):
    pass


@transaction.atomic
def apply_movement(*, item_id: int, movement_type: str, quantity: int, reason: str = "", reference: str = ""):
    """Apply a signed movement to an item's inventory.

    quantity: positive for inbound/additions, negative for outbound/deductions.
    movement_type: label for admin/documentation; logic is driven by sign.
    """
    if quantity == 0:
        return None
    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise MovementError("Item not found")

    if quantity < 0 and abs(quantity) > int(item.inventory):
        raise MovementError("Insufficient available quantity")
    item.inventory = int(item.inventory) + int(quantity)

    item.save(update_fields=["inventory", "updated_at"])
    return StockMovement.objects.create(
        item=item,
        movement_type=movement_type,
        quantity=quantity,
        reason=reason,
        reference=reference,
    )


# EOF
