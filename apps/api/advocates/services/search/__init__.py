"""Advocate search: criteria normalization, shared predicates, SQL and in-memory renderers."""

from .criteria import criteria_from_query_params, criteria_from_state
from .evaluator import filter_advocates
from .pagination import SearchPage, build_pagination, paginate, shape_response
from .query import AdvocateSearchError, search_advocates

__all__ = [
    "criteria_from_query_params",
    "criteria_from_state",
    "filter_advocates",
    "SearchPage",
    "build_pagination",
    "paginate",
    "shape_response",
    "AdvocateSearchError",
    "search_advocates",
]
