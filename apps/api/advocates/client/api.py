import logging

import httpx

from advocates.core import FETCH_FAILED_MESSAGE, get_settings
from advocates.schemas import AdvocateListResponse, SearchCriteria
from advocates.services.search.criteria import criteria_to_query_params

logger = logging.getLogger(__name__)

ADVOCATES_PATH = "/api/advocates"


class AdvocatesApiError(Exception):
    """Raised when the advocates endpoint fails or returns an unexpected response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AdvocatesApiClient:
    """Async client for GET /api/advocates. Pass transport to route requests elsewhere (e.g. tests, ASGI)."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        s = get_settings()
        self.base_url = (base_url or s.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else s.api_timeout_seconds
        self.transport = transport

    async def fetch_advocates(self, criteria: SearchCriteria) -> AdvocateListResponse:
        params = criteria_to_query_params(criteria)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                r = await client.get(ADVOCATES_PATH, params=params)
                r.raise_for_status()
                return AdvocateListResponse.model_validate(r.json())
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.warning("Advocates API error %s: %s", e.response.status_code, message)
            raise AdvocatesApiError(message, status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            logger.warning("Advocates API unreachable: %s", e)
            raise AdvocatesApiError(FETCH_FAILED_MESSAGE) from e
        except ValueError as e:
            # invalid JSON or a body that does not match AdvocateListResponse
            logger.warning("Advocates API returned an unexpected response: %s", e)
            raise AdvocatesApiError(FETCH_FAILED_MESSAGE) from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP error! status: {response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP error! status: {response.status_code}"
