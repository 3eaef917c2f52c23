"""
Client-side state container for the advocate search UI.

One store owns the last-fetched advocate list, the search query and filters,
and the derived filtered view. Every action that changes criteria recomputes
filtered_advocates from scratch with the in-memory evaluator, which applies
the same predicates as the server. fetch_advocates() reloads from the API.

The store is meant to be driven from a single event loop; it is not thread-safe.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Literal

from advocates.client.api import AdvocatesApiClient, AdvocatesApiError
from advocates.core import SEARCH_HISTORY_LIMIT, get_settings
from advocates.schemas import AdvocateListResponse, AdvocateResponse, Pagination, SearchCriteria, SearchFilters
from advocates.services.search import SearchPage, criteria_from_state, filter_advocates, paginate
from advocates.services.search.facets import advocate_stats, filter_options_for

logger = logging.getLogger(__name__)

StoreStatus = Literal["idle", "loading", "error", "empty", "ready"]

_FILTER_FIELDS = frozenset(SearchFilters.model_fields)


@dataclass
class SearchHistoryItem:
    query: str
    filters: SearchFilters
    results_count: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)

    def same_search(self, other: "SearchHistoryItem") -> bool:
        return self.query == other.query and self.filters == other.filters


class AdvocateStore:
    def __init__(self, api: AdvocatesApiClient | None = None, page_size: int | None = None):
        self.api = api or AdvocatesApiClient()
        self.page_size = page_size or get_settings().default_page_size

        self.advocates: list[AdvocateResponse] = []
        self.filtered_advocates: list[AdvocateResponse] = []
        self.search_query: str = ""
        self.filters: SearchFilters = SearchFilters()
        self.pagination: Pagination | None = None
        self.loading: bool = False
        self.error: str | None = None
        self.search_history: list[SearchHistoryItem] = []
        self._fetched = False

    # ---- derived state ----

    @property
    def criteria(self) -> SearchCriteria:
        return criteria_from_state(self.search_query, self.filters, limit=self.page_size)

    @property
    def status(self) -> StoreStatus:
        """Distinguishes a failed fetch ("error") from a search with no matches ("empty")."""
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        if not self._fetched and not self.advocates:
            return "idle"
        return "ready" if self.filtered_advocates else "empty"

    def stats(self) -> dict[str, Any]:
        return advocate_stats(self.advocates)

    def filter_options(self):
        return filter_options_for(self.advocates)

    def page_of_results(self, page: int = 1) -> SearchPage[AdvocateResponse]:
        """One page of filtered_advocates, sized by page_size."""
        return paginate(self.filtered_advocates, page, self.page_size)

    def _refilter(self) -> None:
        self.filtered_advocates = filter_advocates(self.advocates, self.criteria)

    # ---- search actions ----

    def set_search_query(self, query: str) -> None:
        self.search_query = query or ""
        self._refilter()

    def set_filters(self, **changes: Any) -> None:
        """Merge partial filter changes (city, specialty, degree, experience); unknown keys are ignored."""
        unknown = set(changes) - _FILTER_FIELDS
        if unknown:
            logger.debug("Ignoring unknown filter keys: %s", sorted(unknown))
        update = {k: ("" if v is None else str(v)) for k, v in changes.items() if k in _FILTER_FIELDS}
        self.filters = self.filters.model_copy(update=update)
        self._refilter()

    def clear_filters(self) -> None:
        self.filters = SearchFilters()
        self._refilter()

    def clear_search(self) -> None:
        self.search_query = ""
        self.filters = SearchFilters()
        self._refilter()

    # ---- data actions ----

    async def fetch_advocates(self, page: int = 1, limit: int | None = None, *, apply_filters: bool = False) -> None:
        """Reload advocates from the API.

        By default every page of the unfiltered catalog is loaded, so local
        refinement sees the complete set. apply_filters sends the current
        criteria and keeps the single requested page.
        """
        self.loading = True
        self.error = None
        try:
            if apply_filters:
                criteria = criteria_from_state(
                    self.search_query, self.filters, page=page, limit=limit or self.page_size
                )
                resp = await self.api.fetch_advocates(criteria)
                advocates = list(resp.data)
            else:
                advocates, resp = await self._fetch_all(limit or self.page_size)
        except AdvocatesApiError as e:
            self.error = str(e)
            self.advocates = []
            self.pagination = None
            self.filtered_advocates = []
            return
        finally:
            self.loading = False
            self._fetched = True
        self.advocates = advocates
        self.pagination = resp.pagination
        self._refilter()

    async def _fetch_all(self, limit: int) -> tuple[list[AdvocateResponse], AdvocateListResponse]:
        advocates: list[AdvocateResponse] = []
        page = 1
        while True:
            resp = await self.api.fetch_advocates(criteria_from_state(page=page, limit=limit))
            advocates.extend(resp.data)
            if not resp.pagination.has_more or not resp.data:
                return advocates, resp
            page += 1

    def clear_error(self) -> None:
        self.error = None

    # Local-only edits; the API exposes no write endpoints.

    def add_advocate(self, **fields: Any) -> AdvocateResponse:
        next_id = max((a.id for a in self.advocates), default=0) + 1
        advocate = AdvocateResponse(id=next_id, **fields)
        self.advocates.append(advocate)
        self._refilter()
        return advocate

    def update_advocate(self, advocate_id: int, **updates: Any) -> None:
        self.advocates = [
            AdvocateResponse.model_validate({**a.model_dump(), **updates}) if a.id == advocate_id else a
            for a in self.advocates
        ]
        self._refilter()

    def delete_advocate(self, advocate_id: int) -> None:
        self.advocates = [a for a in self.advocates if a.id != advocate_id]
        self._refilter()

    # ---- search history ----

    def add_to_search_history(
        self,
        query: str | None = None,
        filters: SearchFilters | None = None,
        results_count: int | None = None,
    ) -> None:
        """Record a search (defaults: current query, filters and result count). Empty searches are skipped."""
        query = (self.search_query if query is None else query).strip()
        filters = (filters or self.filters).model_copy()
        if results_count is None:
            results_count = len(self.filtered_advocates)
        if not query and not any(filters.model_dump().values()):
            return

        item = SearchHistoryItem(query=query, filters=filters, results_count=results_count)
        history = list(self.search_history)
        for i, existing in enumerate(history):
            if existing.same_search(item):
                history[i] = item
                break
        else:
            history.insert(0, item)
        self.search_history = history[:SEARCH_HISTORY_LIMIT]

    def clear_search_history(self) -> None:
        self.search_history = []
