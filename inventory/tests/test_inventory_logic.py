import pytest
from catalog.tests.factories import ItemFactory
from inventory.models import StockMovement
from inventory.services import MovementError, apply_movement


@pytest.mark.django_db
def test_signed_movement_inbound_and_outbound():
    item = ItemFactory(inventory=10)

    # Inbound (+5)
    apply_movement(item_id=item.id, movement_type=StockMovement.TYPE_INBOUND, quantity=5)
    item.refresh_from_db()
    assert item.inventory == 15

    # Outbound (-3)
    movement = apply_movement(
        item_id=item.id, movement_type=StockMovement.TYPE_OUTBOUND, quantity=-3, reference="cart:1"
    )
    item.refresh_from_db()
    assert item.inventory == 12
    assert movement.quantity == -3
    assert movement.reference == "cart:1"

    # Prevent overdraft
    with pytest.raises(MovementError):
        apply_movement(item_id=item.id, movement_type=StockMovement.TYPE_OUTBOUND, quantity=-20)
    item.refresh_from_db()
    assert item.inventory == 12


@pytest.mark.django_db
def test_outbound_may_drain_stock_to_zero():
    item = ItemFactory(inventory=2)

    apply_movement(item_id=item.id, movement_type=StockMovement.TYPE_OUTBOUND, quantity=-2)
    item.refresh_from_db()
    assert item.inventory == 0


@pytest.mark.django_db
def test_zero_quantity_is_a_noop():
    item = ItemFactory(inventory=3)

    assert apply_movement(item_id=item.id, movement_type=StockMovement.TYPE_ADJUST, quantity=0) is None
    assert StockMovement.objects.filter(item=item).count() == 0


@pytest.mark.django_db
def test_unknown_item_raises():
    with pytest.raises(MovementError):
        apply_movement(item_id=999999, movement_type=StockMovement.TYPE_INBOUND, quantity=1)
