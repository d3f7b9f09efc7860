"""Services for the transaction ledger."""

from .exceptions import (
    TransactionsServiceError,
    TransactionNotFoundError,
)
from .ledger import (
    create_transaction,
    update_transaction,
    delete_transaction,
    get_transaction_by_id,
    list_transactions,
    get_transactions_by_date_range,
    get_transactions_by_type,
    subscription_end_for,
)

__all__ = [
    # Exceptions
    'TransactionsServiceError',
    'TransactionNotFoundError',
    # Ledger
    'create_transaction',
    'update_transaction',
    'delete_transaction',
    'get_transaction_by_id',
    'list_transactions',
    'get_transactions_by_date_range',
    'get_transactions_by_type',
    'subscription_end_for',
]
