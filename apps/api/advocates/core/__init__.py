"""Core configuration, constants, and shared infrastructure."""

from advocates.core.config import Settings, get_settings
from advocates.core.constants import (
    DEFAULT_PAGE,
    EXPERIENCE_BUCKETS,
    EXPERIENCE_OPTIONS,
    FETCH_FAILED_MESSAGE,
    MAX_SQL_OFFSET,
    SEARCH_HISTORY_LIMIT,
)
from advocates.core.limiter import limiter, search_rate_limit

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_PAGE",
    "EXPERIENCE_BUCKETS",
    "EXPERIENCE_OPTIONS",
    "FETCH_FAILED_MESSAGE",
    "MAX_SQL_OFFSET",
    "SEARCH_HISTORY_LIMIT",
    "limiter",
    "search_rate_limit",
]
