from slowapi import Limiter
from slowapi.util import get_remote_address

from advocates.core.config import get_settings


def search_rate_limit() -> str:
    """Per-IP limit for the list endpoint, read from settings at request time. Multi-instance needs Redis later."""
    return get_settings().search_rate_limit


limiter = Limiter(key_func=get_remote_address)
