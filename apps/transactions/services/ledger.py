"""
Transaction ledger.

Every write keeps the daily stats aggregate in step with the transaction
table inside the same atomic block.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.common.dates import add_months, day_bounds, day_floor
from apps.stats.services import apply_contribution, apply_transaction
from ..models import Transaction, TransactionType, PaymentMethod
from .exceptions import TransactionNotFoundError

logger = logging.getLogger(__name__)


def subscription_end_for(start: datetime) -> datetime:
    """
    Default subscription end: same local time one calendar month later.

    The month is counted on the local calendar, so a subscription taken just
    after midnight on Jan 31 local time ends on Feb 28 (or 29).
    """
    if timezone.is_aware(start):
        start = timezone.localtime(start)
    return add_months(start, 1)


@transaction.atomic
def create_transaction(
    *,
    type: str,
    amount: Decimal,
    payment_method: str = PaymentMethod.CASH,
    date: Optional[datetime] = None,
    client_name: str = '',
    notes: str = '',
    subscription_end_date: Optional[datetime] = None
) -> Transaction:
    """
    Record a transaction and add it to its day's stats.

    Subscriptions without an explicit end date end one calendar month after
    the transaction date.

    Args:
        type: entry, subscription or cafe
        amount: Amount paid
        payment_method: cash, card or transfer
        date: When it happened (default: now)
        client_name: Optional customer name
        notes: Optional free text
        subscription_end_date: Explicit subscription end

    Returns:
        Created Transaction instance
    """
    date = date or timezone.now()

    if type == TransactionType.SUBSCRIPTION and subscription_end_date is None:
        subscription_end_date = subscription_end_for(date)

    txn = Transaction.objects.create(
        type=type,
        amount=amount,
        payment_method=payment_method,
        date=date,
        client_name=client_name or '',
        notes=notes or '',
        subscription_end_date=subscription_end_date,
    )

    apply_transaction(txn, 1)

    logger.info("Transaction %s created: %s %s", txn.id, txn.type, txn.amount)
    return txn


@transaction.atomic
def update_transaction(
    *,
    transaction_id: int,
    type: Optional[str] = None,
    amount: Optional[Decimal] = None,
    payment_method: Optional[str] = None,
    date: Optional[datetime] = None,
    client_name: Optional[str] = None,
    notes: Optional[str] = None,
    subscription_end_date: Optional[datetime] = None
) -> Transaction:
    """
    Apply a partial update and reconcile the daily stats.

    Only provided (non-None) fields change. When type, amount or date
    changes, the original contribution is taken off the original day and
    the new one is added to the new day.
    A row that stops being a subscription loses its end date unless the
    patch sets one.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
    """
    try:
        txn = Transaction.objects.select_for_update().get(id=transaction_id)
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")

    original_type = txn.type
    original_amount = txn.amount
    original_date = txn.date

    if type is not None:
        txn.type = type
    if amount is not None:
        txn.amount = amount
    if payment_method is not None:
        txn.payment_method = payment_method
    if date is not None:
        txn.date = date
    if client_name is not None:
        txn.client_name = client_name
    if notes is not None:
        txn.notes = notes
    if subscription_end_date is not None:
        txn.subscription_end_date = subscription_end_date

    if (
        txn.type == TransactionType.SUBSCRIPTION
        and txn.subscription_end_date is None
    ):
        txn.subscription_end_date = subscription_end_for(
            date or original_date or timezone.now()
        )
    elif txn.type != TransactionType.SUBSCRIPTION and subscription_end_date is None:
        txn.subscription_end_date = None

    txn.save()

    contribution_changed = (
        txn.type != original_type
        or txn.amount != original_amount
        or txn.date != original_date
    )
    if contribution_changed:
        apply_contribution(
            day=day_floor(original_date),
            transaction_type=original_type,
            amount=original_amount,
            sign=-1,
        )
        apply_transaction(txn, 1)
        logger.info(
            "Transaction %s updated, stats moved from %s to %s",
            txn.id, day_floor(original_date), day_floor(txn.date)
        )
    else:
        logger.info("Transaction %s updated", txn.id)

    return txn


@transaction.atomic
def delete_transaction(*, transaction_id: int) -> None:
    """
    Delete a transaction and subtract it from its day's stats.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
    """
    try:
        txn = Transaction.objects.select_for_update().get(id=transaction_id)
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")

    apply_transaction(txn, -1)
    txn.delete()

    logger.info("Transaction %s deleted", transaction_id)


def get_transaction_by_id(*, transaction_id: int) -> Transaction:
    """
    Retrieve a transaction by ID.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
    """
    try:
        return Transaction.objects.get(id=transaction_id)
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")


def list_transactions(*, limit: Optional[int] = None, offset: int = 0) -> QuerySet[Transaction]:
    """Transactions newest first, optionally paginated."""
    queryset = Transaction.objects.order_by('-date', '-id')
    if limit is not None:
        return queryset[offset:offset + limit]
    return queryset[offset:]


def get_transactions_by_date_range(start, end) -> QuerySet[Transaction]:
    """Transactions dated within the given days (both inclusive), newest first."""
    lower, upper = day_bounds(start, end)
    return (
        Transaction.objects
        .filter(date__gte=lower, date__lt=upper)
        .order_by('-date', '-id')
    )


def get_transactions_by_type(transaction_type: str) -> QuerySet[Transaction]:
    return Transaction.objects.filter(type=transaction_type).order_by('-date', '-id')
