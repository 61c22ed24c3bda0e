from decimal import Decimal

import pytest
from catalog.models import Item
from catalog.tests.factories import ItemFactory
from django.db import IntegrityError


@pytest.mark.django_db
def test_inventory_available_up_to_and_including_stock():
    item = ItemFactory(inventory=4)

    assert item.is_inventory_available(3) is True
    # Equality to inventory is allowed
    assert item.is_inventory_available(4) is True
    assert item.is_inventory_available(5) is False


@pytest.mark.django_db
def test_zero_inventory_only_allows_zero():
    item = ItemFactory(inventory=0)

    assert item.is_inventory_available(0) is True
    assert item.is_inventory_available(1) is False


@pytest.mark.django_db
def test_negative_price_violates_constraint():
    with pytest.raises(IntegrityError):
        Item.objects.create(title="Broken", sku="SKU-NEG", price=Decimal("-1.00"), inventory=1)
