import factory
from catalog.models import Item
from factory import Faker
from factory.django import DjangoModelFactory


class ItemFactory(DjangoModelFactory):
    class Meta:
        model = Item

    title = Faker("sentence", nb_words=3)
    sku = factory.Sequence(lambda n: f"SKU-{n:05d}")
    price = factory.Faker("pydecimal", left_digits=3, right_digits=2, positive=True)
    inventory = 10
