"""
Service layer tests for the transaction ledger.

Tests cover:
- Daily stats kept in step on create, update and delete
- Subscription end date derivation
- Error handling
"""

import pytest
from decimal import Decimal
from datetime import date, datetime, timezone as dt_timezone
from django.utils import timezone

from apps.stats.models import DailyStats
from apps.transactions.models import Transaction, TransactionType, PaymentMethod
from apps.transactions.services import (
    create_transaction,
    update_transaction,
    delete_transaction,
    get_transaction_by_id,
    list_transactions,
    get_transactions_by_date_range,
    get_transactions_by_type,
    TransactionNotFoundError,
)
from .conftest import at


def stats_for(day):
    return DailyStats.objects.get(date=day)


# =============================================================================
# Create
# =============================================================================

@pytest.mark.django_db
class TestCreateTransaction:

    def test_entry_updates_daily_stats(self, entry):
        stats = stats_for(date(2024, 1, 10))

        assert stats.entries_count == 1
        assert stats.entries_revenue == Decimal('25.00')
        assert stats.total_revenue == Decimal('25.00')
        assert stats.subscriptions_count == 0
        assert stats.cafe_orders_count == 0

    def test_totals_sum_over_day(self, entry, cafe_order):
        create_transaction(
            type=TransactionType.ENTRY,
            amount=Decimal('25.00'),
            date=at(2024, 1, 10, 18),
        )
        stats = stats_for(date(2024, 1, 10))

        assert stats.entries_count == 2
        assert stats.cafe_orders_count == 1
        assert stats.total_revenue == Decimal('65.00')
        assert stats.total_revenue == (
            stats.entries_revenue + stats.subscriptions_revenue + stats.cafe_revenue
        )

    def test_days_are_separate_rows(self, entry):
        create_transaction(
            type=TransactionType.ENTRY,
            amount=Decimal('25.00'),
            date=at(2024, 1, 11),
        )

        assert stats_for(date(2024, 1, 10)).entries_count == 1
        assert stats_for(date(2024, 1, 11)).entries_count == 1

    def test_subscription_end_date_defaults_to_one_month(self, db):
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=at(2024, 3, 15),
        )

        assert txn.subscription_end_date == at(2024, 4, 15)
        assert stats_for(date(2024, 3, 15)).subscriptions_count == 1

    def test_subscription_end_date_clamped_to_month_end(self, db):
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=at(2024, 1, 31),
        )

        assert txn.subscription_end_date == at(2024, 2, 29)

    def test_subscription_end_date_counts_local_month(self, settings):
        settings.TIME_ZONE = 'Europe/Paris'
        # 23:30 UTC on Jan 30 is already Jan 31 in Paris
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=datetime(2024, 1, 30, 23, 30, tzinfo=dt_timezone.utc),
        )

        end = timezone.localtime(txn.subscription_end_date)
        assert end.date() == date(2024, 2, 29)
        assert (end.hour, end.minute) == (0, 30)

    def test_explicit_subscription_end_date_kept(self, db):
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('800.00'),
            date=at(2024, 1, 1),
            subscription_end_date=at(2024, 4, 1),
        )

        assert txn.subscription_end_date == at(2024, 4, 1)

    def test_entry_has_no_end_date(self, entry):
        assert entry.subscription_end_date is None

    def test_date_defaults_to_now(self, db):
        txn = create_transaction(type=TransactionType.CAFE, amount=Decimal('10.00'))

        assert txn.date is not None
        assert DailyStats.objects.filter(cafe_orders_count=1).count() == 1


# =============================================================================
# Update
# =============================================================================

@pytest.mark.django_db
class TestUpdateTransaction:

    def test_amount_change_reconciles_same_day(self, entry):
        update_transaction(transaction_id=entry.id, amount=Decimal('30.00'))
        stats = stats_for(date(2024, 1, 10))

        assert stats.entries_count == 1
        assert stats.entries_revenue == Decimal('30.00')
        assert stats.total_revenue == Decimal('30.00')

    def test_date_change_moves_contribution(self, entry):
        update_transaction(transaction_id=entry.id, date=at(2024, 1, 12))

        old_day = stats_for(date(2024, 1, 10))
        new_day = stats_for(date(2024, 1, 12))
        assert old_day.entries_count == 0
        assert old_day.total_revenue == Decimal('0.00')
        assert new_day.entries_count == 1
        assert new_day.total_revenue == Decimal('25.00')

    def test_type_change_moves_category(self, entry):
        update_transaction(transaction_id=entry.id, type=TransactionType.CAFE)
        stats = stats_for(date(2024, 1, 10))

        assert stats.entries_count == 0
        assert stats.entries_revenue == Decimal('0.00')
        assert stats.cafe_orders_count == 1
        assert stats.cafe_revenue == Decimal('25.00')
        assert stats.total_revenue == Decimal('25.00')

    def test_change_to_subscription_derives_end_date(self, entry):
        txn = update_transaction(transaction_id=entry.id, type=TransactionType.SUBSCRIPTION)

        assert txn.subscription_end_date == at(2024, 2, 10)

    def test_change_to_subscription_uses_patched_date(self, entry):
        txn = update_transaction(
            transaction_id=entry.id,
            type=TransactionType.SUBSCRIPTION,
            date=at(2024, 5, 31),
        )

        assert txn.subscription_end_date == at(2024, 6, 30)

    def test_leaving_subscription_clears_end_date(self, db):
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=at(2024, 3, 15),
        )

        txn = update_transaction(transaction_id=txn.id, type=TransactionType.ENTRY)

        assert txn.subscription_end_date is None
        txn.refresh_from_db()
        assert txn.subscription_end_date is None

    def test_leaving_subscription_keeps_explicit_end_date(self, db):
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=at(2024, 3, 15),
        )

        txn = update_transaction(
            transaction_id=txn.id,
            type=TransactionType.CAFE,
            subscription_end_date=at(2024, 3, 20),
        )

        assert txn.subscription_end_date == at(2024, 3, 20)

    def test_non_contribution_change_leaves_stats(self, entry):
        update_transaction(
            transaction_id=entry.id,
            client_name='Yasmine',
            payment_method=PaymentMethod.CARD,
        )
        stats = stats_for(date(2024, 1, 10))

        assert stats.entries_count == 1
        assert stats.total_revenue == Decimal('25.00')
        entry.refresh_from_db()
        assert entry.client_name == 'Yasmine'

    def test_update_missing(self, db):
        with pytest.raises(TransactionNotFoundError):
            update_transaction(transaction_id=99999, amount=Decimal('1.00'))


# =============================================================================
# Delete
# =============================================================================

@pytest.mark.django_db
class TestDeleteTransaction:

    def test_create_then_delete_returns_to_baseline(self, entry, cafe_order):
        baseline = stats_for(date(2024, 1, 10))
        txn = create_transaction(
            type=TransactionType.SUBSCRIPTION,
            amount=Decimal('300.00'),
            date=at(2024, 1, 10, 9),
        )

        delete_transaction(transaction_id=txn.id)
        stats = stats_for(date(2024, 1, 10))

        assert stats.total_revenue == baseline.total_revenue
        assert stats.subscriptions_count == baseline.subscriptions_count
        assert stats.subscriptions_revenue == baseline.subscriptions_revenue
        assert not Transaction.objects.filter(id=txn.id).exists()

    def test_count_clamped_at_zero(self, entry):
        stats = stats_for(date(2024, 1, 10))
        stats.entries_count = 0
        stats.save()

        delete_transaction(transaction_id=entry.id)
        stats.refresh_from_db()

        assert stats.entries_count == 0
        assert stats.entries_revenue == Decimal('0.00')

    def test_revenue_may_go_negative(self, entry):
        stats = stats_for(date(2024, 1, 10))
        stats.total_revenue = Decimal('10.00')
        stats.entries_revenue = Decimal('10.00')
        stats.save()

        delete_transaction(transaction_id=entry.id)
        stats.refresh_from_db()

        assert stats.total_revenue == Decimal('-15.00')

    def test_delete_missing(self, db):
        with pytest.raises(TransactionNotFoundError):
            delete_transaction(transaction_id=99999)


# =============================================================================
# Reads
# =============================================================================

@pytest.mark.django_db
class TestTransactionQueries:

    def test_get_missing(self, db):
        with pytest.raises(TransactionNotFoundError):
            get_transaction_by_id(transaction_id=99999)

    def test_list_newest_first_with_pagination(self, entry, cafe_order):
        assert list(list_transactions()) == [cafe_order, entry]
        assert list(list_transactions(limit=1)) == [cafe_order]
        assert list(list_transactions(limit=1, offset=1)) == [entry]

    def test_date_range_is_inclusive(self, entry, cafe_order):
        late = create_transaction(
            type=TransactionType.ENTRY,
            amount=Decimal('25.00'),
            date=at(2024, 1, 11, 23),
        )
        create_transaction(
            type=TransactionType.ENTRY,
            amount=Decimal('25.00'),
            date=at(2024, 1, 12, 0),
        )

        result = list(get_transactions_by_date_range(date(2024, 1, 10), date(2024, 1, 11)))

        assert result == [late, cafe_order, entry]

    def test_by_type(self, entry, cafe_order):
        assert list(get_transactions_by_type(TransactionType.CAFE)) == [cafe_order]
