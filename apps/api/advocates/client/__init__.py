"""Python client for the advocates API and the client-side search state."""

from .api import AdvocatesApiClient, AdvocatesApiError
from .store import AdvocateStore, SearchHistoryItem

__all__ = ["AdvocatesApiClient", "AdvocatesApiError", "AdvocateStore", "SearchHistoryItem"]
