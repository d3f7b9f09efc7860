from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal


class TransactionType(models.TextChoices):
    ENTRY = 'entry', 'Daily entry'
    SUBSCRIPTION = 'subscription', 'Subscription'
    CAFE = 'cafe', 'Cafe order'


class PaymentMethod(models.TextChoices):
    CASH = 'cash', 'Cash'
    CARD = 'card', 'Card'
    TRANSFER = 'transfer', 'Bank transfer'


class Transaction(models.Model):
    """A single takings event: a day pass, a subscription or a cafe order."""
    
    type = models.CharField(max_length=20, choices=TransactionType.choices)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    date = models.DateTimeField(default=timezone.now)
    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH
    )
    
    # Customer details
    client_name = models.CharField(max_length=200, blank=True)
    notes = models.TextField(blank=True)
    
    # Set for subscriptions (defaults to date + 1 month)
    subscription_end_date = models.DateTimeField(null=True, blank=True)
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['date'], name='transactions_date_idx'),
            models.Index(fields=['type', 'date'], name='transactions_type_date_idx'),
        ]
        ordering = ['-date', '-id']
    
    def __str__(self):
        return f"{self.get_type_display()} - {self.amount} ({self.date:%Y-%m-%d})"
