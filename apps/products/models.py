from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class ProductCategory(models.TextChoices):
    BEVERAGE = 'beverage', 'Beverage'
    FOOD = 'food', 'Food'
    SNACK = 'snack', 'Snack'
    OTHER = 'other', 'Other'


class Product(models.Model):
    """Item sold at the cafe counter."""
    
    name = models.CharField(max_length=200)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(
        max_length=20,
        choices=ProductCategory.choices,
        default=ProductCategory.BEVERAGE
    )
    is_active = models.BooleanField(default=True)
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['category', 'is_active'], name='products_category_active_idx'),
        ]
        ordering = ['name']
    
    def __str__(self):
        return f"{self.name} ({self.price})"
