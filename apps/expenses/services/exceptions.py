"""Domain-specific exceptions for expenses services."""


class ExpensesServiceError(Exception):
    """Base exception for expenses services."""
    pass


class ExpenseNotFoundError(ExpensesServiceError):
    """Raised when expense does not exist."""
    pass
