import pytest
from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal
from apps.expenses.models import Expense, ExpenseCategory
from apps.stats.models import DailyStats


@pytest.fixture
def january_stats(db):
    """Three days of stats in January 2024 totalling 1000.00."""
    return [
        DailyStats.objects.create(
            date=date(2024, 1, 5),
            total_revenue=Decimal('300.00'),
            entries_revenue=Decimal('300.00'),
            entries_count=12,
        ),
        DailyStats.objects.create(
            date=date(2024, 1, 6),
            total_revenue=Decimal('400.00'),
            subscriptions_revenue=Decimal('300.00'),
            subscriptions_count=1,
            cafe_revenue=Decimal('100.00'),
            cafe_orders_count=7,
        ),
        DailyStats.objects.create(
            date=date(2024, 1, 20),
            total_revenue=Decimal('300.00'),
            entries_revenue=Decimal('300.00'),
            entries_count=12,
        ),
    ]


@pytest.fixture
def january_expenses(db):
    """Supplies 200.00 and rent 100.00 in January, plus one in February."""
    def at(day, month=1):
        return datetime(2024, month, day, 12, 0, tzinfo=dt_timezone.utc)

    return [
        Expense.objects.create(amount=Decimal('150.00'), category=ExpenseCategory.SUPPLIES, date=at(3)),
        Expense.objects.create(amount=Decimal('50.00'), category=ExpenseCategory.SUPPLIES, date=at(31)),
        Expense.objects.create(amount=Decimal('100.00'), category=ExpenseCategory.RENT, date=at(1)),
        Expense.objects.create(amount=Decimal('999.00'), category=ExpenseCategory.RENT, date=at(1, month=2)),
    ]
