"""Services for daily stats aggregation and reports."""

from .exceptions import (
    StatsServiceError,
    InvalidStatsFieldError,
)
from .aggregator import (
    StatsSnapshot,
    CATEGORY_FIELDS,
    STATS_FIELDS,
    apply_delta,
    apply_contribution,
    apply_transaction,
    upsert_daily_stats,
    get_daily_stats,
    get_daily_stats_or_stub,
    get_stats_range,
    rebuild_daily_stats,
)
from .reports import (
    get_net_revenue,
)

__all__ = [
    # Exceptions
    'StatsServiceError',
    'InvalidStatsFieldError',
    # Aggregator
    'StatsSnapshot',
    'CATEGORY_FIELDS',
    'STATS_FIELDS',
    'apply_delta',
    'apply_contribution',
    'apply_transaction',
    'upsert_daily_stats',
    'get_daily_stats',
    'get_daily_stats_or_stub',
    'get_stats_range',
    'rebuild_daily_stats',
    # Reports
    'get_net_revenue',
]
