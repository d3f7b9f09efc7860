"""
Daily stats aggregation.

The aggregate update is split in two: ``apply_delta`` is a pure function on
an immutable snapshot, and ``apply_contribution`` applies it to the stored
row for one day while holding a row lock.
"""

import logging
from dataclasses import dataclass, fields, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.common.dates import day_bounds, day_floor
from apps.transactions.models import Transaction, TransactionType
from ..models import DailyStats
from .exceptions import InvalidStatsFieldError

logger = logging.getLogger(__name__)

# transaction type -> (revenue field, count field)
CATEGORY_FIELDS = {
    TransactionType.ENTRY: ('entries_revenue', 'entries_count'),
    TransactionType.SUBSCRIPTION: ('subscriptions_revenue', 'subscriptions_count'),
    TransactionType.CAFE: ('cafe_revenue', 'cafe_orders_count'),
}


@dataclass(frozen=True)
class StatsSnapshot:
    """Aggregate values of one DailyStats row."""

    total_revenue: Decimal = Decimal('0.00')
    entries_revenue: Decimal = Decimal('0.00')
    entries_count: int = 0
    subscriptions_revenue: Decimal = Decimal('0.00')
    subscriptions_count: int = 0
    cafe_revenue: Decimal = Decimal('0.00')
    cafe_orders_count: int = 0

    @classmethod
    def from_row(cls, row: DailyStats) -> 'StatsSnapshot':
        return cls(**{f.name: getattr(row, f.name) for f in fields(cls)})

    def copy_to(self, row: DailyStats) -> None:
        for f in fields(self):
            setattr(row, f.name, getattr(self, f.name))


STATS_FIELDS = tuple(f.name for f in fields(StatsSnapshot))


def apply_delta(
    snapshot: StatsSnapshot,
    *,
    transaction_type: str,
    amount: Decimal,
    sign: int
) -> StatsSnapshot:
    """
    Add (sign=1) or remove (sign=-1) one transaction's contribution.

    Revenue moves by ``sign * amount`` and may go negative; the category
    count moves by ``sign`` and never drops below zero.
    """
    if sign not in (1, -1):
        raise ValueError("sign must be 1 or -1")

    revenue_field, count_field = CATEGORY_FIELDS[transaction_type]
    delta = Decimal(amount) * sign

    return replace(
        snapshot,
        total_revenue=snapshot.total_revenue + delta,
        **{
            revenue_field: getattr(snapshot, revenue_field) + delta,
            count_field: max(0, getattr(snapshot, count_field) + sign),
        }
    )


@transaction.atomic
def apply_contribution(
    *,
    day: date,
    transaction_type: str,
    amount: Decimal,
    sign: int
) -> DailyStats:
    """
    Apply one contribution to the stored row for ``day``.

    The row is created with zeroed aggregates when missing and locked with
    select_for_update() for the read-modify-write.
    """
    stats, created = (
        DailyStats.objects
        .select_for_update()
        .get_or_create(date=day)
    )

    snapshot = apply_delta(
        StatsSnapshot.from_row(stats),
        transaction_type=transaction_type,
        amount=amount,
        sign=sign,
    )
    snapshot.copy_to(stats)
    stats.save(update_fields=list(STATS_FIELDS))

    logger.debug(
        "Daily stats %s: %s %s %s (created=%s)",
        day, '+' if sign > 0 else '-', transaction_type, amount, created
    )
    return stats


def apply_transaction(txn: Transaction, sign: int) -> DailyStats:
    """Add (1) or subtract (-1) a transaction on its own day's row."""
    return apply_contribution(
        day=day_floor(txn.date),
        transaction_type=txn.type,
        amount=txn.amount,
        sign=sign,
    )


@transaction.atomic
def upsert_daily_stats(*, date: date, **values) -> DailyStats:
    """
    Create the row for ``date`` or overwrite the given aggregate fields.

    Fields not passed keep their stored value (zero on insert).

    Raises:
        InvalidStatsFieldError: If a keyword is not an aggregate field
    """
    unknown = sorted(set(values) - set(STATS_FIELDS))
    if unknown:
        raise InvalidStatsFieldError(f"Unknown stats fields: {', '.join(unknown)}")

    stats, created = (
        DailyStats.objects
        .select_for_update()
        .get_or_create(date=day_floor(date), defaults=values)
    )
    if not created and values:
        for name, value in values.items():
            setattr(stats, name, value)
        stats.save(update_fields=list(values))

    return stats


def get_daily_stats(day) -> Optional[DailyStats]:
    return DailyStats.objects.filter(date=day_floor(day)).first()


def get_daily_stats_or_stub(day) -> DailyStats:
    """
    Return the stored row for ``day`` or an unsaved all-zero instance.

    The stub has ``id`` None and is never written.
    """
    stats = get_daily_stats(day)
    if stats is None:
        stats = DailyStats(date=day_floor(day))
    return stats


def get_stats_range(start, end) -> QuerySet[DailyStats]:
    """Stored rows with date between start and end (inclusive days), ascending."""
    return (
        DailyStats.objects
        .filter(date__gte=day_floor(start), date__lte=day_floor(end))
        .order_by('date')
    )


@transaction.atomic
def rebuild_daily_stats(start=None, end=None) -> int:
    """
    Recompute DailyStats rows from the transaction table.

    Rows for the covered days are deleted and written again from scratch.
    Either bound may be omitted to leave that side open.

    Returns:
        Number of rows written
    """
    transactions = Transaction.objects.all()
    stats = DailyStats.objects.all()

    if start is not None:
        lower, _ = day_bounds(start, start)
        transactions = transactions.filter(date__gte=lower)
        stats = stats.filter(date__gte=day_floor(start))
    if end is not None:
        _, upper = day_bounds(end, end)
        transactions = transactions.filter(date__lt=upper)
        stats = stats.filter(date__lte=day_floor(end))

    snapshots: dict[date, StatsSnapshot] = {}
    for txn in transactions.only('type', 'amount', 'date').iterator():
        day = day_floor(txn.date)
        snapshots[day] = apply_delta(
            snapshots.get(day, StatsSnapshot()),
            transaction_type=txn.type,
            amount=txn.amount,
            sign=1,
        )

    deleted, _ = stats.delete()

    rows = []
    for day, snapshot in sorted(snapshots.items()):
        row = DailyStats(date=day)
        snapshot.copy_to(row)
        rows.append(row)
    DailyStats.objects.bulk_create(rows)

    logger.info(
        "Rebuilt daily stats: %d rows removed, %d rows written",
        deleted, len(rows)
    )
    return len(rows)
