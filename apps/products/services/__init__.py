"""Services for product catalogue."""

from .exceptions import (
    ProductsServiceError,
    ProductNotFoundError,
)
from .catalog import (
    list_products,
    get_product_by_id,
    create_product,
    update_product,
    ensure_default_products,
    DEFAULT_PRODUCTS,
)

__all__ = [
    # Exceptions
    'ProductsServiceError',
    'ProductNotFoundError',
    # Catalogue
    'list_products',
    'get_product_by_id',
    'create_product',
    'update_product',
    'ensure_default_products',
    'DEFAULT_PRODUCTS',
]
