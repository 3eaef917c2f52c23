"""Offset/limit pagination metadata shared by the SQL and in-memory search paths."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

from advocates.schemas.advocate import AdvocateListResponse, AdvocateResponse, Pagination

T = TypeVar("T")


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    """totalPages = ceil(total / limit) with limit clamped to >= 1; hasMore = page < totalPages."""
    limit = max(1, int(limit))
    page = max(1, int(page))
    total = max(0, int(total))
    total_pages = math.ceil(total / limit)
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_more=page < total_pages,
    )


@dataclass
class SearchPage(Generic[T]):
    """One page of matching records plus pagination metadata."""

    data: list[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=lambda: build_pagination(1, 1, 0))


def paginate(records: Sequence[T], page: int, limit: int) -> SearchPage[T]:
    """Slice an in-memory result set. A page past the end yields empty data, not an error."""
    meta = build_pagination(page, limit, len(records))
    start = (meta.page - 1) * meta.limit
    return SearchPage(data=list(records[start:start + meta.limit]), pagination=meta)


def shape_response(result: SearchPage[Any]) -> AdvocateListResponse:
    """Wrap a page of ORM rows, dicts, or AdvocateResponse objects into the wire response."""
    return AdvocateListResponse(
        data=[AdvocateResponse.model_validate(row) for row in result.data],
        pagination=result.pagination,
    )
