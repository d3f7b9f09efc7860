from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class StockActionType(models.TextChoices):
    ADD = 'add', 'Add'
    REMOVE = 'remove', 'Remove'
    ADJUST = 'adjust', 'Adjust'


def default_min_threshold():
    return settings.DEFAULT_MIN_STOCK_THRESHOLD


class Inventory(models.Model):
    """
    Current stock level of one product.

    Quantity only changes through stock movements; the movement log for a
    product always sums to its quantity.
    """
    
    product = models.OneToOneField(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='inventory'
    )
    quantity = models.PositiveIntegerField(default=0)
    min_threshold = models.PositiveIntegerField(default=default_min_threshold)
    purchase_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    expiration_date = models.DateTimeField(null=True, blank=True)
    last_restock_date = models.DateTimeField(null=True, blank=True)
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'inventory'
        verbose_name_plural = 'inventory'
        ordering = ['product__name']
    
    def __str__(self):
        return f"{self.product.name}: {self.quantity}"
    
    @property
    def is_low_stock(self):
        return self.quantity <= self.min_threshold


class StockMovement(models.Model):
    """Append-only log entry for one stock change. Quantity is signed."""
    
    inventory = models.ForeignKey(
        Inventory,
        on_delete=models.CASCADE,
        related_name='movements'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='stock_movements'
    )
    quantity = models.IntegerField()
    action_type = models.CharField(max_length=10, choices=StockActionType.choices)
    reason = models.CharField(max_length=255, blank=True)
    performed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='stock_movements'
    )
    transaction = models.ForeignKey(
        'transactions.Transaction',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='stock_movements'
    )
    timestamp = models.DateTimeField(auto_now_add=True)
    
    class Meta:
        db_table = 'stock_movements'
        indexes = [
            models.Index(fields=['product', 'timestamp'], name='stock_mov_product_ts_idx'),
        ]
        ordering = ['-timestamp', '-id']
    
    def __str__(self):
        return f"{self.action_type} {self.quantity:+d} {self.product_id}"
