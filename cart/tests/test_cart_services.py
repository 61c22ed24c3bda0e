from decimal import Decimal

import pytest
from cart.models import Cart, LineItem
from cart.services import CartError, add_item
from cart.tests.factories import CartFactory
from catalog.tests.factories import ItemFactory


@pytest.fixture
def cart(db):
    return CartFactory()


@pytest.fixture
def item(db):
    return ItemFactory(inventory=4)


def test_add_item_creates_line_item(cart, item):
    line_item = add_item(cart=cart, item=item, quantity=2)

    assert line_item.cart_id == cart.id
    assert cart.line_items.first().quantity == 2


def test_add_item_twice_merges_into_one_line(cart, item):
    add_item(cart=cart, item=item, quantity=2)
    add_item(cart=cart, item=item, quantity=1)

    assert cart.line_items.count() == 1
    assert cart.line_items.first().quantity == 3


def test_add_item_caps_new_line_at_inventory(cart, item):
    add_item(cart=cart, item=item, quantity=8)

    assert cart.line_items.first().quantity == 4


def test_add_item_caps_merged_line_at_inventory(cart, item):
    add_item(cart=cart, item=item, quantity=3)
    add_item(cart=cart, item=item, quantity=3)

    assert cart.line_items.count() == 1
    assert cart.line_items.first().quantity == 4


def test_add_item_skips_out_of_stock_items(cart):
    item = ItemFactory(inventory=0)

    result = add_item(cart=cart, item=item, quantity=1)

    assert result is None
    assert cart.line_items.count() == 0


def test_add_item_does_not_touch_existing_line_when_stock_runs_out(cart, item):
    add_item(cart=cart, item=item, quantity=2)
    item.inventory = 0
    item.save(update_fields=["inventory", "updated_at"])

    add_item(cart=cart, item=item, quantity=1)

    assert cart.line_items.count() == 1
    assert cart.line_items.first().quantity == 2


def test_add_item_leaves_inventory_untouched(cart, item):
    add_item(cart=cart, item=item, quantity=3)

    item.refresh_from_db()
    assert item.inventory == 4


@pytest.mark.parametrize("quantity", [0, -1])
def test_add_item_rejects_non_positive_quantity(cart, item, quantity):
    with pytest.raises(CartError):
        add_item(cart=cart, item=item, quantity=quantity)
    assert cart.line_items.count() == 0


def test_add_item_keeps_lines_per_cart(item):
    first, second = CartFactory(), CartFactory()

    add_item(cart=first, item=item, quantity=1)
    add_item(cart=second, item=item, quantity=2)

    assert LineItem.objects.filter(item=item).count() == 2
    assert first.line_items.get().quantity == 1
    assert second.line_items.get().quantity == 2


def test_total_sums_item_prices(cart):
    add_item(cart=cart, item=ItemFactory(price=Decimal("10.99")), quantity=1)
    add_item(cart=cart, item=ItemFactory(price=Decimal("10.99")), quantity=1)

    assert cart.total == Decimal("21.98")

    add_item(cart=cart, item=ItemFactory(price=Decimal("11.99")), quantity=1)

    assert cart.total == Decimal("33.97")


def test_total_of_empty_cart_is_zero(cart):
    assert cart.total == Decimal("0.00")


def test_total_counts_each_linked_item_once_regardless_of_quantity(cart):
    add_item(cart=cart, item=ItemFactory(price=Decimal("10.99"), inventory=5), quantity=3)

    assert cart.total == Decimal("10.99")


def test_total_counts_duplicate_links(cart):
    item = ItemFactory(price=Decimal("5.25"))
    # Links created outside add_item are not merged
    LineItem.objects.create(cart=cart, item=item, quantity=1)
    LineItem.objects.create(cart=cart, item=item, quantity=1)

    assert cart.total == Decimal("10.50")


def test_cart_survives_service_calls(cart, item):
    add_item(cart=cart, item=item, quantity=1)

    assert Cart.objects.filter(id=cart.id).exists()
