"""Expense ledger service. Expenses have no aggregation side effects."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.common.dates import day_bounds
from apps.transactions.models import PaymentMethod
from ..models import Expense
from .exceptions import ExpenseNotFoundError

logger = logging.getLogger(__name__)


def create_expense(
    *,
    amount: Decimal,
    category: str,
    date: Optional[datetime] = None,
    description: str = '',
    payment_method: str = PaymentMethod.CASH,
    created_by: Optional[User] = None
) -> Expense:
    expense = Expense.objects.create(
        amount=amount,
        category=category,
        date=date or timezone.now(),
        description=description or '',
        payment_method=payment_method,
        created_by=created_by,
    )
    logger.info("Expense %s created: %s %s", expense.id, expense.category, expense.amount)
    return expense


def get_expense_by_id(*, expense_id: int) -> Expense:
    """
    Retrieve an expense by ID.

    Raises:
        ExpenseNotFoundError: If expense doesn't exist
    """
    try:
        return Expense.objects.select_related('created_by').get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError("Expense not found")


@transaction.atomic
def update_expense(
    *,
    expense_id: int,
    amount: Optional[Decimal] = None,
    category: Optional[str] = None,
    date: Optional[datetime] = None,
    description: Optional[str] = None,
    payment_method: Optional[str] = None
) -> Expense:
    """
    Update an expense. Only provided (non-None) fields change.

    Raises:
        ExpenseNotFoundError: If expense doesn't exist
    """
    try:
        expense = Expense.objects.select_for_update().get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError("Expense not found")

    if amount is not None:
        expense.amount = amount
    if category is not None:
        expense.category = category
    if date is not None:
        expense.date = date
    if description is not None:
        expense.description = description
    if payment_method is not None:
        expense.payment_method = payment_method

    expense.save()
    logger.info("Expense %s updated", expense.id)
    return expense


def delete_expense(*, expense_id: int) -> None:
    """
    Delete an expense.

    Raises:
        ExpenseNotFoundError: If expense doesn't exist
    """
    deleted, _ = Expense.objects.filter(id=expense_id).delete()
    if not deleted:
        raise ExpenseNotFoundError("Expense not found")
    logger.info("Expense %s deleted", expense_id)


def list_expenses() -> QuerySet[Expense]:
    return Expense.objects.select_related('created_by').order_by('-date', '-id')


def get_expenses_by_date_range(start, end) -> QuerySet[Expense]:
    """Expenses dated within the given days (both inclusive), newest first."""
    lower, upper = day_bounds(start, end)
    return list_expenses().filter(date__gte=lower, date__lt=upper)


def get_expenses_by_category(category: str) -> QuerySet[Expense]:
    return list_expenses().filter(category=category)
