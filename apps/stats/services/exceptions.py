"""Domain-specific exceptions for stats services."""


class StatsServiceError(Exception):
    """Base exception for stats services."""
    pass


class InvalidStatsFieldError(StatsServiceError):
    """Raised when an upsert names a field that is not an aggregate column."""
    pass
