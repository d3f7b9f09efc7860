"""Inventory rows and stock queries."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from ..models import Inventory, StockMovement, StockActionType
from .exceptions import (
    DuplicateInventoryError,
    InventoryNotFoundError,
    InvalidQuantityError,
)
from .stock_ledger import get_stock_product, record_movement

logger = logging.getLogger(__name__)

# Marks an update argument that was not supplied, as opposed to None.
UNSET = object()


@transaction.atomic
def create_inventory_item(
    *,
    product_id: int,
    quantity: int = 0,
    min_threshold: Optional[int] = None,
    purchase_price: Optional[Decimal] = None,
    expiration_date: Optional[datetime] = None,
    user: Optional[User] = None
) -> Inventory:
    """
    Create the inventory row for a product.

    A non-zero opening quantity is recorded as an ``add`` movement so the
    movement log stays in step with the stock level.

    Raises:
        ProductNotFoundError: If product doesn't exist
        DuplicateInventoryError: If the product already has a row
        InvalidQuantityError: If quantity is negative
    """
    if quantity < 0:
        raise InvalidQuantityError("Quantity cannot be negative")

    product = get_stock_product(product_id)
    if Inventory.objects.filter(product=product).exists():
        raise DuplicateInventoryError(f"Inventory already exists for {product.name}")

    try:
        with transaction.atomic():
            inventory = Inventory.objects.create(
                product=product,
                quantity=quantity,
                min_threshold=(
                    min_threshold if min_threshold is not None
                    else settings.DEFAULT_MIN_STOCK_THRESHOLD
                ),
                purchase_price=purchase_price,
                expiration_date=expiration_date,
                last_restock_date=timezone.now() if quantity > 0 else None,
            )
    except IntegrityError:
        raise DuplicateInventoryError(f"Inventory already exists for {product.name}")

    if quantity > 0:
        record_movement(
            inventory,
            quantity=quantity,
            action_type=StockActionType.ADD,
            user=user,
            reason='Stock initial',
        )

    logger.info("Inventory created for product %s with %d units", product_id, quantity)
    return inventory


@transaction.atomic
def update_inventory_item(
    *,
    inventory_id: int,
    min_threshold: Optional[int] = None,
    purchase_price: Any = UNSET,
    expiration_date: Any = UNSET
) -> Inventory:
    """
    Update inventory settings. Quantity only changes through stock movements.

    Omitted purchase_price and expiration_date are left as they are; passing
    None clears them.

    Raises:
        InventoryNotFoundError: If inventory row doesn't exist
    """
    try:
        inventory = (
            Inventory.objects
            .select_for_update()
            .select_related('product')
            .get(id=inventory_id)
        )
    except Inventory.DoesNotExist:
        raise InventoryNotFoundError("Inventory item not found")

    if min_threshold is not None:
        inventory.min_threshold = min_threshold
    if purchase_price is not UNSET:
        inventory.purchase_price = purchase_price
    if expiration_date is not UNSET:
        inventory.expiration_date = expiration_date

    inventory.save()
    return inventory


def get_inventory_item(*, inventory_id: int) -> Inventory:
    """
    Retrieve an inventory row by ID.

    Raises:
        InventoryNotFoundError: If inventory row doesn't exist
    """
    try:
        return Inventory.objects.select_related('product').get(id=inventory_id)
    except Inventory.DoesNotExist:
        raise InventoryNotFoundError("Inventory item not found")


def list_inventory() -> QuerySet[Inventory]:
    return Inventory.objects.select_related('product').order_by('product__name')


def get_product_movements(*, product_id: Optional[int] = None) -> QuerySet[StockMovement]:
    """Movement log, newest first, optionally for one product."""
    queryset = StockMovement.objects.select_related('product', 'performed_by')
    if product_id is not None:
        queryset = queryset.filter(product_id=product_id)
    return queryset.order_by('-timestamp', '-id')


def get_expiring_items(*, days_threshold: Optional[int] = None) -> QuerySet[Inventory]:
    """Rows expiring between now and ``days_threshold`` days from now, soonest first."""
    if days_threshold is None:
        days_threshold = settings.EXPIRING_ITEMS_DEFAULT_DAYS

    now = timezone.now()
    return (
        list_inventory()
        .filter(
            expiration_date__gte=now,
            expiration_date__lte=now + timedelta(days=days_threshold),
        )
        .order_by('expiration_date')
    )


def get_low_stock_items() -> QuerySet[Inventory]:
    """Rows at or below their minimum threshold, lowest quantity first."""
    return (
        list_inventory()
        .filter(quantity__lte=F('min_threshold'))
        .order_by('quantity', 'product__name')
    )
