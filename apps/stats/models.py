from django.db import models
from decimal import Decimal


class DailyStats(models.Model):
    """
    Per-day revenue and volume totals.

    Maintained incrementally by the transaction ledger: one row per local
    calendar day, equal to the sum of contributions of the transactions
    dated that day.
    """
    
    date = models.DateField(unique=True)
    
    total_revenue = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    
    entries_revenue = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    entries_count = models.PositiveIntegerField(default=0)
    
    subscriptions_revenue = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    subscriptions_count = models.PositiveIntegerField(default=0)
    
    cafe_revenue = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    cafe_orders_count = models.PositiveIntegerField(default=0)
    
    class Meta:
        db_table = 'daily_stats'
        ordering = ['date']
        verbose_name_plural = 'daily stats'
    
    def __str__(self):
        return f"{self.date}: {self.total_revenue}"
