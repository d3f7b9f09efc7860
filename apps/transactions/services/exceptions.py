"""Domain-specific exceptions for transactions services."""


class TransactionsServiceError(Exception):
    """Base exception for transactions services."""
    pass


class TransactionNotFoundError(TransactionsServiceError):
    """Raised when transaction does not exist."""
    pass
