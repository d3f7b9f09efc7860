"""Revenue reports built on the daily stats aggregate."""

from decimal import Decimal

from django.db.models import Sum

from apps.common.dates import day_bounds, day_floor
from apps.expenses.models import Expense
from .aggregator import get_stats_range


def get_net_revenue(start, end) -> dict:
    """
    Compute revenue minus expenses over an inclusive day range.

    Revenue comes from the stored DailyStats rows; expenses are summed from
    the expense ledger over the same days and broken down by category.

    Returns:
        Dict with start_date, end_date, total_revenue, total_expenses,
        net_revenue and expense_breakdown
    """
    start_date, end_date = day_floor(start), day_floor(end)

    total_revenue = (
        get_stats_range(start_date, end_date)
        .aggregate(total=Sum('total_revenue'))['total']
        or Decimal('0.00')
    )

    lower, upper = day_bounds(start_date, end_date)
    expenses = Expense.objects.filter(date__gte=lower, date__lt=upper)

    breakdown = {
        row['category']: row['total']
        for row in (
            expenses
            .values('category')
            .annotate(total=Sum('amount'))
            .order_by('category')
        )
    }
    total_expenses = sum(breakdown.values(), Decimal('0.00'))

    return {
        'start_date': start_date,
        'end_date': end_date,
        'total_revenue': total_revenue,
        'total_expenses': total_expenses,
        'net_revenue': total_revenue - total_expenses,
        'expense_breakdown': breakdown,
    }
