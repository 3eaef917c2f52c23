"""Tests for the client-side state container."""

import httpx
import pytest

from advocates.client import AdvocatesApiClient, AdvocateStore
from advocates.main import app
from advocates.schemas import SearchFilters


@pytest.fixture
async def store(api_client):
    """Store wired to the real app over ASGI, backed by the seeded SQLite database."""
    api = AdvocatesApiClient(base_url="http://test", transport=httpx.ASGITransport(app=app))
    return AdvocateStore(api=api, page_size=100)


def _failing_store() -> AdvocateStore:
    def handler(request):
        return httpx.Response(500, json={"error": "Failed to fetch advocates"})

    api = AdvocatesApiClient(base_url="http://test", transport=httpx.MockTransport(handler))
    return AdvocateStore(api=api)


def _last_names(advocates):
    return [a.last_name for a in advocates]


async def test_initial_state_is_idle(store):
    assert store.advocates == []
    assert store.filtered_advocates == []
    assert store.loading is False
    assert store.error is None
    assert store.status == "idle"


async def test_fetch_populates_advocates_and_filtered_view(store):
    await store.fetch_advocates()
    assert len(store.advocates) == 12
    assert store.filtered_advocates == store.advocates
    assert store.pagination.total == 12
    assert store.status == "ready"
    assert store.loading is False


async def test_set_search_query_refines_locally(store):
    await store.fetch_advocates()
    store.set_search_query("york")
    assert sorted(a.city for a in store.filtered_advocates) == ["New York", "New York City", "Yorktown"]
    assert len(store.advocates) == 12


async def test_set_filters_merges_partial_changes(store):
    await store.fetch_advocates()
    store.set_filters(specialty="law")
    store.set_filters(experience="3-5")
    assert store.filters == SearchFilters(specialty="law", experience="3-5")
    assert _last_names(store.filtered_advocates) == ["Chen"]


async def test_set_filters_ignores_unknown_keys(store):
    await store.fetch_advocates()
    store.set_filters(color="blue", degree="PhD")
    assert store.filters == SearchFilters(degree="PhD")
    assert {a.degree for a in store.filtered_advocates} == {"PhD"}


async def test_unrecognized_experience_is_no_constraint(store):
    await store.fetch_advocates()
    store.set_filters(experience="99+")
    assert store.filtered_advocates == store.advocates


async def test_no_matches_is_empty_not_error(store):
    await store.fetch_advocates()
    store.set_filters(degree="md", city="boston")
    assert store.filtered_advocates == []
    assert store.status == "empty"
    assert store.error is None


async def test_clear_filters_keeps_query(store):
    await store.fetch_advocates()
    store.set_search_query("law")
    store.set_filters(city="boston")
    store.clear_filters()
    assert store.filters == SearchFilters()
    assert store.search_query == "law"
    assert {a.last_name for a in store.filtered_advocates} == {"Chen", "Garcia", "Miller"}


async def test_clear_search_resets_everything(store):
    await store.fetch_advocates()
    store.set_search_query("law")
    store.set_filters(city="boston")
    store.clear_search()
    assert store.search_query == ""
    assert store.filters == SearchFilters()
    assert store.filtered_advocates == store.advocates


async def test_local_refinement_matches_server_filtering(store):
    await store.fetch_advocates()
    store.set_search_query("a")
    store.set_filters(degree="MD")
    local = [a.id for a in store.filtered_advocates]

    await store.fetch_advocates(apply_filters=True)
    assert [a.id for a in store.advocates] == local
    assert store.filtered_advocates == store.advocates


async def test_fetch_failure_sets_error():
    store = _failing_store()
    await store.fetch_advocates()
    assert store.error == "Failed to fetch advocates"
    assert store.advocates == []
    assert store.loading is False
    assert store.status == "error"

    store.clear_error()
    assert store.error is None
    assert store.status == "empty"


async def test_local_stub_edits(store):
    await store.fetch_advocates()
    added = store.add_advocate(
        first_name="Ada",
        last_name="King",
        city="Denver",
        degree="PhD",
        specialties=["Sleep issues"],
        years_of_experience=4,
        phone_number=3035551234,
    )
    assert added.id == 13
    store.set_search_query("denver")
    assert _last_names(store.filtered_advocates) == ["King"]

    store.update_advocate(13, city="Boulder")
    assert store.filtered_advocates == []

    store.set_search_query("")
    store.delete_advocate(13)
    assert len(store.advocates) == 12


def test_search_history_skips_empty_and_dedupes():
    store = AdvocateStore(api=AdvocatesApiClient(base_url="http://test"))
    store.add_to_search_history("", SearchFilters(), 0)
    assert store.search_history == []

    store.add_to_search_history("law", SearchFilters(city="Boston"), 3)
    store.add_to_search_history("md", SearchFilters(), 5)
    store.add_to_search_history(" law ", SearchFilters(city="Boston"), 1)

    assert [(h.query, h.results_count) for h in store.search_history] == [("md", 5), ("law", 1)]

    for i in range(15):
        store.add_to_search_history(f"q{i}")
    assert len(store.search_history) == 10
    assert store.search_history[0].query == "q14"

    store.clear_search_history()
    assert store.search_history == []


def test_search_history_defaults_to_current_state():
    store = AdvocateStore(api=AdvocatesApiClient(base_url="http://test"))
    store.set_search_query("cardio")
    store.set_filters(degree="MD")
    store.add_to_search_history()
    item = store.search_history[0]
    assert item.query == "cardio"
    assert item.filters == SearchFilters(degree="MD")
    assert item.results_count == 0


async def test_stats_and_filter_options(store):
    await store.fetch_advocates()
    stats = store.stats()
    assert stats["total_advocates"] == 12
    assert stats["cities_count"] == 11
    assert stats["average_experience"] == round(121 / 12)
    assert stats["experience_distribution"] == {
        "11-15": 3,
        "3-5": 2,
        "0-2": 2,
        "16-20": 2,
        "20+": 1,
        "6-10": 2,
    }

    options = store.filter_options()
    assert [o.value for o in options.city_options][:3] == ["Boston", "Chicago", "Dallas"]
    assert [o.value for o in options.experience_options][-1] == "20+"


async def test_default_fetch_loads_every_page(api_client):
    api = AdvocatesApiClient(base_url="http://test", transport=httpx.ASGITransport(app=app))
    store = AdvocateStore(api=api)
    assert store.page_size == 10

    await store.fetch_advocates()
    assert len(store.advocates) == 12
    assert store.pagination.total == 12

    store.set_search_query("los angeles")
    assert _last_names(store.filtered_advocates) == ["Anderson"]
    assert store.status == "ready"


async def test_page_of_results_slices_filtered_view():
    requested = []

    def handler(request):
        requested.append(request.url.params["page"])
        return httpx.Response(
            200,
            json={
                "data": [
                    {
                        "id": i,
                        "firstName": f"First{i}",
                        "lastName": f"Last{i}",
                        "city": "Boston",
                        "degree": "MD",
                        "specialties": [],
                        "yearsOfExperience": 1,
                        "phoneNumber": 5550000 + i,
                    }
                    for i in range(1, 4)
                ],
                "pagination": {"page": 1, "limit": 3, "total": 3, "totalPages": 1, "hasMore": False},
            },
        )

    api = AdvocatesApiClient(base_url="http://test", transport=httpx.MockTransport(handler))
    store = AdvocateStore(api=api, page_size=2)
    await store.fetch_advocates()
    assert requested == ["1"]

    first = store.page_of_results(1)
    assert [a.id for a in first.data] == [1, 2]
    assert first.pagination.total_pages == 2
    assert first.pagination.has_more is True
    assert [a.id for a in store.page_of_results(2).data] == [3]
    assert store.page_of_results(5).data == []
