"""Services for the expense ledger."""

from .exceptions import (
    ExpensesServiceError,
    ExpenseNotFoundError,
)
from .expense_ledger import (
    create_expense,
    get_expense_by_id,
    update_expense,
    delete_expense,
    list_expenses,
    get_expenses_by_date_range,
    get_expenses_by_category,
)

__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'ExpenseNotFoundError',
    # Ledger
    'create_expense',
    'get_expense_by_id',
    'update_expense',
    'delete_expense',
    'list_expenses',
    'get_expenses_by_date_range',
    'get_expenses_by_category',
]
