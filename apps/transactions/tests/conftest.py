import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from apps.transactions.models import TransactionType, PaymentMethod
from apps.transactions.services import create_transaction


def at(year, month, day, hour=10):
    """Aware UTC timestamp for test data."""
    return datetime(year, month, day, hour, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def entry(db):
    """A 25.00 cash entry on 2024-01-10."""
    return create_transaction(
        type=TransactionType.ENTRY,
        amount=Decimal('25.00'),
        payment_method=PaymentMethod.CASH,
        date=at(2024, 1, 10),
    )


@pytest.fixture
def cafe_order(db):
    """A 15.00 cafe order on 2024-01-10."""
    return create_transaction(
        type=TransactionType.CAFE,
        amount=Decimal('15.00'),
        payment_method=PaymentMethod.CARD,
        date=at(2024, 1, 10, 14),
        notes='Café expresso',
    )
