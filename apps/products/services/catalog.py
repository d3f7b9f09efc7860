"""Product catalogue service."""

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from ..models import Product, ProductCategory
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS = [
    ('Café expresso', Decimal('15.00')),
    ('Café américain', Decimal('18.00')),
    ('Thé à la menthe', Decimal('12.00')),
    ('Eau minérale', Decimal('10.00')),
    ("Jus d'orange", Decimal('20.00')),
]


def list_products(*, active_only: bool = False) -> QuerySet[Product]:
    queryset = Product.objects.all()
    if active_only:
        queryset = queryset.filter(is_active=True)
    return queryset.order_by('name')


def get_product_by_id(*, product_id: int) -> Product:
    """
    Retrieve a product by ID.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")


def create_product(
    *,
    name: str,
    price: Decimal,
    category: str = ProductCategory.BEVERAGE,
    is_active: bool = True
) -> Product:
    return Product.objects.create(
        name=name,
        price=price,
        category=category,
        is_active=is_active,
    )


@transaction.atomic
def update_product(
    *,
    product_id: int,
    name: Optional[str] = None,
    price: Optional[Decimal] = None,
    category: Optional[str] = None,
    is_active: Optional[bool] = None
) -> Product:
    """
    Update a product. Only provided (non-None) fields change.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")

    if name is not None:
        product.name = name
    if price is not None:
        product.price = price
    if category is not None:
        product.category = category
    if is_active is not None:
        product.is_active = is_active

    product.save()
    return product


@transaction.atomic
def ensure_default_products() -> list[Product]:
    """
    Seed the default drinks menu when the catalogue is empty.

    Returns:
        List of created products (empty if products already existed)
    """
    if Product.objects.exists():
        return []

    created = [
        Product.objects.create(name=name, price=price, category=ProductCategory.BEVERAGE)
        for name, price in DEFAULT_PRODUCTS
    ]
    logger.info("Seeded %d default products", len(created))
    return created
