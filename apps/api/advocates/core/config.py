from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    database_url: str = "postgresql://localhost/advocates"
    sql_echo: bool = False

    log_level: str = "INFO"

    # Page size used when the request omits `limit`; larger requests are clamped to max_page_size
    default_page_size: int = 10
    max_page_size: int = 100

    # Rate limiting (per remote address; multi-instance needs Redis later)
    search_rate_limit: str = "60/minute"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    # Base URL the Python client uses to reach the API
    api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: float = 10.0

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def async_database_url(self) -> str:
        """database_url rewritten for the async driver (postgres:// -> postgresql+asyncpg://)."""
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://") and "asyncpg" not in url:
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
