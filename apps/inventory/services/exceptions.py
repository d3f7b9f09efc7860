"""Domain-specific exceptions for inventory services."""


class InventoryServiceError(Exception):
    """Base exception for inventory services."""
    pass


class InventoryNotFoundError(InventoryServiceError):
    """Raised when a product has no inventory row."""
    pass


class DuplicateInventoryError(InventoryServiceError):
    """Raised when creating a second inventory row for a product."""
    pass


class InsufficientStockError(InventoryServiceError):
    """Raised when removing more units than are in stock."""
    pass


class InvalidQuantityError(InventoryServiceError):
    """Raised when a stock quantity is out of range."""
    pass
