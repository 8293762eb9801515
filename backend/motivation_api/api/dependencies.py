"""Route Dependencies: resolve the shared Gemini client and request config.

Invariants:
    - Config and the client live on app.state (set by create_app / lifespan)
    - Tests replace these via app.dependency_overrides
"""

from fastapi import Request

from motivation_api.core.domain_types import QuoteRequestConfig
from motivation_api.infrastructure.gemini_client import ResilientGeminiClient


def get_gemini_client(request: Request) -> ResilientGeminiClient:
    return request.app.state.gemini_client


def get_quote_config(request: Request) -> QuoteRequestConfig:
    return request.app.state.quote_config
