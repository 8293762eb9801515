"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process
    - The fetcher receives a QuoteRequestConfig, never Settings itself
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from motivation_api.core.domain_types import DEFAULT_GEMINI_API_URL, QuoteRequestConfig
from motivation_api.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000

    # Gemini
    gemini_api_key: str = ""
    gemini_api_url: str = DEFAULT_GEMINI_API_URL
    gemini_max_retries: int = 5
    gemini_timeout_seconds: float = 10.0
    gemini_base_delay_ms: int = 1000
    # Unset means no overall cap across retries
    gemini_deadline_seconds: float | None = None

    # Static assets
    serve_static: bool = False
    static_dir: str = "public"

    # API
    cors_origins: list[str] = [
        "http://localhost:5500",
        "https://motivationquotesgen.netlify.app",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("gemini_api_url")
    @classmethod
    def reject_query_string(cls, v: str) -> str:
        """The key is appended as ?key=; a URL that already has a query is rejected."""
        v = v.strip()
        if "?" in v:
            raise ValueError("GEMINI_API_URL must not contain a query string")
        return v

    def quote_request_config(self) -> QuoteRequestConfig:
        try:
            return QuoteRequestConfig(
                api_url=self.gemini_api_url,
                api_key=self.gemini_api_key,
                max_attempts=self.gemini_max_retries,
                timeout_seconds=self.gemini_timeout_seconds,
                base_delay_ms=self.gemini_base_delay_ms,
                deadline_seconds=self.gemini_deadline_seconds,
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid Gemini configuration: {e}")


@lru_cache
def get_settings() -> Settings:
    return Settings()
