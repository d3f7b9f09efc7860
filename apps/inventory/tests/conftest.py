import pytest
from decimal import Decimal
from apps.inventory.models import Inventory
from apps.products.models import Product, ProductCategory


@pytest.fixture
def product(db):
    return Product.objects.create(
        name='Eau minérale',
        price=Decimal('10.00'),
        category=ProductCategory.BEVERAGE,
    )


@pytest.fixture
def other_product(db):
    return Product.objects.create(
        name='Cookie',
        price=Decimal('8.00'),
        category=ProductCategory.SNACK,
    )


@pytest.fixture
def stocked_inventory(product):
    """Inventory row with 12 units and no purchase price."""
    return Inventory.objects.create(product=product, quantity=12, min_threshold=5)


@pytest.fixture
def priced_inventory(product):
    """Empty inventory row with a 4.00 purchase price."""
    return Inventory.objects.create(
        product=product,
        quantity=0,
        min_threshold=5,
        purchase_price=Decimal('4.00'),
    )
