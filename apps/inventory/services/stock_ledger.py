"""
Stock ledger service with concurrency protection.

Each mutation locks the inventory row with select_for_update() and writes
the new quantity together with its StockMovement in one atomic block.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.expenses.models import Expense, ExpenseCategory
from apps.expenses.services import create_expense
from apps.products.models import Product
from apps.products.services import ProductNotFoundError
from apps.transactions.models import Transaction
from apps.transactions.services import TransactionNotFoundError
from ..models import Inventory, StockMovement, StockActionType
from .exceptions import (
    InventoryNotFoundError,
    InsufficientStockError,
    InvalidQuantityError,
)

logger = logging.getLogger(__name__)


def get_stock_product(product_id: int) -> Product:
    """Raises ProductNotFoundError for an unknown product."""
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")


def _lock_inventory(product_id: int, *, create: bool) -> Inventory:
    """
    Lock the inventory row of a product, creating an empty one if asked.

    Raises:
        ProductNotFoundError: If product doesn't exist
        InventoryNotFoundError: If there is no row and create is False
    """
    product = get_stock_product(product_id)
    queryset = Inventory.objects.select_for_update().select_related('product')

    if create:
        inventory, created = queryset.get_or_create(
            product=product,
            defaults={
                'quantity': 0,
                'min_threshold': settings.DEFAULT_MIN_STOCK_THRESHOLD,
            }
        )
        if created:
            logger.info("Inventory row created for product %s", product_id)
        return inventory

    try:
        return queryset.get(product=product)
    except Inventory.DoesNotExist:
        raise InventoryNotFoundError(f"No inventory for product {product.name}")


def record_movement(
    inventory: Inventory,
    *,
    quantity: int,
    action_type: str,
    user: Optional[User],
    reason: str = '',
    transaction_id: Optional[int] = None
) -> StockMovement:
    """Append one entry to the movement log of an inventory row."""
    return StockMovement.objects.create(
        inventory=inventory,
        product_id=inventory.product_id,
        quantity=quantity,
        action_type=action_type,
        reason=reason or '',
        performed_by=user,
        transaction_id=transaction_id,
    )


def _record_purchase_expense(
    inventory: Inventory,
    *,
    quantity: int,
    user: Optional[User]
) -> Optional[Expense]:
    """
    Book a supplies expense for restocked units that have a purchase price.

    Runs in a savepoint; a failure is logged and never undoes the stock
    change.
    """
    if not inventory.purchase_price or inventory.purchase_price <= 0:
        return None

    try:
        with transaction.atomic():
            return create_expense(
                amount=inventory.purchase_price * quantity,
                category=ExpenseCategory.SUPPLIES,
                description=f"Achat de stock: {inventory.product.name} x{quantity}",
                created_by=user,
            )
    except Exception:
        logger.exception(
            "Could not record purchase expense for product %s", inventory.product_id
        )
        return None


@transaction.atomic
def add_stock(
    *,
    product_id: int,
    quantity: int,
    user: Optional[User] = None,
    reason: str = ''
) -> tuple[Inventory, StockMovement]:
    """
    Receive units into stock.

    Creates the inventory row if the product has none. When the row has a
    purchase price, a supplies expense is booked for the received units.

    Args:
        product_id: Product receiving stock
        quantity: Units received (> 0)
        user: User performing the operation
        reason: Optional free text

    Returns:
        Tuple of (inventory, movement)

    Raises:
        InvalidQuantityError: If quantity is not positive
        ProductNotFoundError: If product doesn't exist
    """
    if quantity <= 0:
        raise InvalidQuantityError("Quantity must be greater than zero")

    inventory = _lock_inventory(product_id, create=True)
    inventory.quantity += quantity
    inventory.last_restock_date = timezone.now()
    inventory.save(update_fields=['quantity', 'last_restock_date', 'updated_at'])

    movement = record_movement(
        inventory,
        quantity=quantity,
        action_type=StockActionType.ADD,
        user=user,
        reason=reason,
    )

    _record_purchase_expense(inventory, quantity=quantity, user=user)

    logger.info(
        "Stock added: product %s +%d (now %d)",
        product_id, quantity, inventory.quantity
    )
    return inventory, movement


@transaction.atomic
def remove_stock(
    *,
    product_id: int,
    quantity: int,
    user: Optional[User] = None,
    reason: str = '',
    transaction_id: Optional[int] = None
) -> tuple[Inventory, StockMovement]:
    """
    Take units out of stock, optionally linked to a sale.

    Returns:
        Tuple of (inventory, movement)

    Raises:
        InvalidQuantityError: If quantity is not positive
        ProductNotFoundError: If product doesn't exist
        InventoryNotFoundError: If the product has no inventory row
        InsufficientStockError: If quantity exceeds the stock on hand
        TransactionNotFoundError: If transaction_id doesn't exist
    """
    if quantity <= 0:
        raise InvalidQuantityError("Quantity must be greater than zero")

    inventory = _lock_inventory(product_id, create=False)

    if quantity > inventory.quantity:
        logger.warning(
            "Stock removal rejected: product %s requested %d, available %d",
            product_id, quantity, inventory.quantity
        )
        raise InsufficientStockError(
            f"Insufficient stock: requested {quantity}, available {inventory.quantity}"
        )

    if transaction_id is not None and not Transaction.objects.filter(id=transaction_id).exists():
        raise TransactionNotFoundError("Transaction not found")

    inventory.quantity -= quantity
    inventory.save(update_fields=['quantity', 'updated_at'])

    movement = record_movement(
        inventory,
        quantity=-quantity,
        action_type=StockActionType.REMOVE,
        user=user,
        reason=reason,
        transaction_id=transaction_id,
    )

    logger.info(
        "Stock removed: product %s -%d (now %d)",
        product_id, quantity, inventory.quantity
    )
    return inventory, movement


@transaction.atomic
def adjust_stock(
    *,
    product_id: int,
    new_quantity: int,
    user: Optional[User] = None,
    reason: str = ''
) -> tuple[Inventory, StockMovement]:
    """
    Set stock to a counted quantity.

    The movement carries the signed difference and is recorded even when
    the count matches. A positive difference counts as a restock.

    Raises:
        InvalidQuantityError: If new_quantity is negative
        ProductNotFoundError: If product doesn't exist
    """
    if new_quantity < 0:
        raise InvalidQuantityError("Quantity cannot be negative")

    inventory = _lock_inventory(product_id, create=True)
    delta = new_quantity - inventory.quantity

    inventory.quantity = new_quantity
    update_fields = ['quantity', 'updated_at']
    if delta > 0:
        inventory.last_restock_date = timezone.now()
        update_fields.append('last_restock_date')
    inventory.save(update_fields=update_fields)

    movement = record_movement(
        inventory,
        quantity=delta,
        action_type=StockActionType.ADJUST,
        user=user,
        reason=reason,
    )

    logger.info(
        "Stock adjusted: product %s %+d (now %d)",
        product_id, delta, inventory.quantity
    )
    return inventory, movement
