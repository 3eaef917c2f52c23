"""
Criteria normalizer: turn raw search input into a fully-populated SearchCriteria.

Two entry points share the same rules:
- criteria_from_query_params: string-typed URL parameters (server path)
- criteria_from_state: typed client state (search query + filters)

Rules:
- Text fields are stripped; missing values become "".
- Unrecognized experience codes are dropped (no constraint), not rejected.
- page/limit are clamped rather than rejected: non-integers fall back to the
  defaults, page < 1 -> 1, limit < 1 -> 1, limit > max_page_size -> max_page_size.
  page is capped so the row offset still fits a 64-bit SQL integer.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from advocates.core import DEFAULT_PAGE, EXPERIENCE_BUCKETS, MAX_SQL_OFFSET, get_settings
from advocates.schemas.search import SearchCriteria, SearchFilters

logger = logging.getLogger(__name__)

# URL parameter name -> SearchCriteria field
QUERY_PARAM_FIELDS = {
    "search": "query",
    "city": "city",
    "specialty": "specialty",
    "degree": "degree",
    "experience": "experience",
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _int_or_default(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def normalize_experience(code: Any) -> str:
    """Return the bucket code if recognized, else "" (ignored)."""
    s = _text(code)
    if not s:
        return ""
    if s not in EXPERIENCE_BUCKETS:
        logger.debug("Ignoring unrecognized experience bucket %r", s)
        return ""
    return s


def clamp_page(page: Any) -> int:
    last_page = MAX_SQL_OFFSET // max(1, get_settings().max_page_size) + 1
    return min(max(DEFAULT_PAGE, _int_or_default(page, DEFAULT_PAGE)), last_page)


def clamp_limit(limit: Any, max_page_size: Optional[int] = None) -> int:
    settings = get_settings()
    upper = max_page_size if max_page_size is not None else settings.max_page_size
    n = _int_or_default(limit, settings.default_page_size)
    return min(max(1, n), max(1, upper))


def build_criteria(
    *,
    query: Any = "",
    city: Any = "",
    specialty: Any = "",
    degree: Any = "",
    experience: Any = "",
    page: Any = None,
    limit: Any = None,
) -> SearchCriteria:
    return SearchCriteria(
        query=_text(query),
        city=_text(city),
        specialty=_text(specialty),
        degree=_text(degree),
        experience=normalize_experience(experience),
        page=clamp_page(page),
        limit=clamp_limit(limit),
    )


def criteria_from_query_params(params: Mapping[str, Any]) -> SearchCriteria:
    """Build criteria from URL query parameters (search, city, specialty, degree, experience, page, limit)."""
    fields = {field: params.get(name) for name, field in QUERY_PARAM_FIELDS.items()}
    return build_criteria(**fields, page=params.get("page"), limit=params.get("limit"))


def criteria_from_state(
    search_query: str = "",
    filters: SearchFilters | Mapping[str, Any] | None = None,
    page: Any = None,
    limit: Any = None,
) -> SearchCriteria:
    """Build criteria from client state; filters may be a SearchFilters or a partial dict."""
    if filters is None:
        f: Mapping[str, Any] = {}
    elif isinstance(filters, SearchFilters):
        f = filters.model_dump()
    else:
        f = filters
    return build_criteria(
        query=search_query,
        city=f.get("city"),
        specialty=f.get("specialty"),
        degree=f.get("degree"),
        experience=f.get("experience"),
        page=page,
        limit=limit,
    )


def criteria_to_query_params(criteria: SearchCriteria) -> dict[str, str]:
    """Inverse of criteria_from_query_params: non-empty fields only, plus page and limit."""
    out: dict[str, str] = {}
    for name, field in QUERY_PARAM_FIELDS.items():
        value = getattr(criteria, field)
        if value:
            out[name] = value
    out["page"] = str(criteria.page)
    out["limit"] = str(criteria.limit)
    return out
