import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from apps.expenses.models import ExpenseCategory
from apps.expenses.services import create_expense


@pytest.fixture
def rent_expense(admin_user):
    return create_expense(
        amount=Decimal('4000.00'),
        category=ExpenseCategory.RENT,
        date=datetime(2024, 1, 1, 9, 0, tzinfo=dt_timezone.utc),
        description='Loyer janvier',
        created_by=admin_user,
    )


@pytest.fixture
def supplies_expense(admin_user):
    return create_expense(
        amount=Decimal('250.00'),
        category=ExpenseCategory.SUPPLIES,
        date=datetime(2024, 1, 15, 17, 30, tzinfo=dt_timezone.utc),
        description='Café en grains',
        created_by=admin_user,
    )
