from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal

from apps.transactions.models import PaymentMethod


class ExpenseCategory(models.TextChoices):
    SUPPLIES = 'supplies', 'Supplies'
    RENT = 'rent', 'Rent'
    UTILITIES = 'utilities', 'Utilities'
    SALARIES = 'salaries', 'Salaries'
    MAINTENANCE = 'maintenance', 'Maintenance'
    MARKETING = 'marketing', 'Marketing'
    OTHER = 'other', 'Other'


class Expense(models.Model):
    """Money going out of the business."""
    
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(max_length=20, choices=ExpenseCategory.choices)
    date = models.DateTimeField(default=timezone.now)
    description = models.TextField(blank=True)
    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['date'], name='expenses_date_idx'),
            models.Index(fields=['category', 'date'], name='expenses_category_date_idx'),
        ]
        ordering = ['-date', '-id']
    
    def __str__(self):
        return f"{self.get_category_display()} - {self.amount} ({self.date:%Y-%m-%d})"
