"""Services for inventory and the stock movement ledger."""

from .exceptions import (
    InventoryServiceError,
    InventoryNotFoundError,
    DuplicateInventoryError,
    InsufficientStockError,
    InvalidQuantityError,
)
from .stock_ledger import (
    add_stock,
    remove_stock,
    adjust_stock,
)
from .inventory_management import (
    create_inventory_item,
    update_inventory_item,
    get_inventory_item,
    list_inventory,
    get_product_movements,
    get_expiring_items,
    get_low_stock_items,
)

__all__ = [
    # Exceptions
    'InventoryServiceError',
    'InventoryNotFoundError',
    'DuplicateInventoryError',
    'InsufficientStockError',
    'InvalidQuantityError',
    # Stock ledger
    'add_stock',
    'remove_stock',
    'adjust_stock',
    # Inventory management
    'create_inventory_item',
    'update_inventory_item',
    'get_inventory_item',
    'list_inventory',
    'get_product_movements',
    'get_expiring_items',
    'get_low_stock_items',
]
