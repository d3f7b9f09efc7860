"""Domain-specific exceptions for products services."""


class ProductsServiceError(Exception):
    """Base exception for products services."""
    pass


class ProductNotFoundError(ProductsServiceError):
    """Raised when product does not exist."""
    pass
