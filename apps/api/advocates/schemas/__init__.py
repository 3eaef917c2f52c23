"""Pydantic request/response schemas."""

from advocates.schemas.advocate import (
    AdvocateResponse,
    Pagination,
    AdvocateListResponse,
    ErrorResponse,
    FilterOption,
    FilterOptionsResponse,
)
from advocates.schemas.search import SearchCriteria, SearchFilters

__all__ = [
    "AdvocateResponse",
    "Pagination",
    "AdvocateListResponse",
    "ErrorResponse",
    "FilterOption",
    "FilterOptionsResponse",
    "SearchCriteria",
    "SearchFilters",
]
