from decimal import Decimal

import pytest
from cart.models import Cart
from cart.services import CheckoutError, add_item, checkout, empty_cart
from cart.tests.factories import CartFactory
from catalog.tests.factories import ItemFactory
from inventory.models import StockMovement
from orders.models import Order

pytestmark = pytest.mark.django_db


def _cart_with_three_items():
    cart = CartFactory()
    items = [
        ItemFactory(title="Zeta", price=Decimal("10.99"), inventory=5),
        ItemFactory(title="Alpha", price=Decimal("10.99"), inventory=5),
        ItemFactory(title="Mid", price=Decimal("11.99"), inventory=5),
    ]
    for quantity, item in enumerate(items, start=1):
        add_item(cart=cart, item=item, quantity=quantity)
    return cart, items


def test_checkout_creates_order_and_clears_cart():
    cart, items = _cart_with_three_items()
    user = cart.user
    expected_item_ids = list(cart.line_items.values_list("item_id", flat=True))

    order = checkout(cart=cart)

    assert user.orders.count() == 1
    assert order.user_id == user.id
    assert cart.line_items.count() == 0
    assert list(order.order_items.values_list("item_id", flat=True)) == expected_item_ids
    assert expected_item_ids == [i.id for i in items]
    assert [oi.quantity for oi in order.order_items.all()] == [1, 2, 3]
    # The cart row is kept for reuse
    assert Cart.objects.filter(id=cart.id).exists()


def test_checkout_snapshots_item_details():
    cart, items = _cart_with_three_items()

    order = checkout(cart=cart)

    first = order.order_items.first()
    assert first.item_title == "Zeta"
    assert first.item_sku == items[0].sku
    assert first.unit_price == Decimal("10.99")
    assert order.number == f"ORD-{order.id:06d}"
    assert order.email == cart.user.email


def test_checkout_decrements_inventory_and_records_movements():
    cart, items = _cart_with_three_items()

    checkout(cart=cart)

    for item, quantity in zip(items, [1, 2, 3]):
        item.refresh_from_db()
        assert item.inventory == 5 - quantity
    movements = StockMovement.objects.filter(reference=f"cart:{cart.id}")
    assert movements.count() == 3
    assert all(m.movement_type == StockMovement.TYPE_OUTBOUND for m in movements)
    assert sorted(m.quantity for m in movements) == [-3, -2, -1]


def test_checkout_can_leave_inventory_alone():
    cart, items = _cart_with_three_items()

    checkout(cart=cart, decrement_inventory=False)

    for item in items:
        item.refresh_from_db()
        assert item.inventory == 5
    assert StockMovement.objects.count() == 0


def test_checkout_follows_setting_by_default(settings):
    settings.CART_CHECKOUT_DECREMENTS_INVENTORY = False
    cart, items = _cart_with_three_items()

    checkout(cart=cart)

    items[2].refresh_from_db()
    assert items[2].inventory == 5


def test_checkout_rolls_back_when_stock_is_short():
    cart, items = _cart_with_three_items()
    user = cart.user
    # Stock dropped after the item was added
    items[2].inventory = 1
    items[2].save(update_fields=["inventory", "updated_at"])

    with pytest.raises(CheckoutError):
        checkout(cart=cart)

    assert Order.objects.filter(user=user).count() == 0
    assert cart.line_items.count() == 3
    assert StockMovement.objects.count() == 0
    items[0].refresh_from_db()
    assert items[0].inventory == 5


def test_checkout_of_empty_cart_creates_order_without_items():
    cart = CartFactory()
    user = cart.user
    before = user.orders.count()

    order = checkout(cart=cart)

    assert user.orders.count() == before + 1
    assert order.order_items.count() == 0
    assert cart.line_items.count() == 0
    assert StockMovement.objects.count() == 0


def test_cart_is_reusable_after_checkout():
    cart, items = _cart_with_three_items()
    checkout(cart=cart)

    add_item(cart=cart, item=items[0], quantity=1)

    assert cart.line_items.count() == 1
    assert cart.line_items.first().quantity == 1


def test_empty_cart_removes_lines_but_keeps_cart():
    cart, _ = _cart_with_three_items()

    deleted = empty_cart(cart=cart)

    assert deleted == 3
    assert cart.line_items.count() == 0
    assert Cart.objects.filter(id=cart.id).exists()
