import pytest
from decimal import Decimal
from apps.products.models import Product, ProductCategory


@pytest.fixture
def product(db):
    return Product.objects.create(
        name='Café expresso',
        price=Decimal('15.00'),
        category=ProductCategory.BEVERAGE,
    )


@pytest.fixture
def product_inactive(db):
    return Product.objects.create(
        name='Croissant',
        price=Decimal('8.00'),
        category=ProductCategory.FOOD,
        is_active=False,
    )
