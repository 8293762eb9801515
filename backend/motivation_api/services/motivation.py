"""Motivation Service: turns a FetchResult into the HTTP status and body.

Invariants:
    - Success → 200 QuoteResponse; any failure → 500 FallbackQuoteResponse
    - Failure kinds are never distinguished in the response body
"""

import logging

from fastapi import status

from motivation_api.core.domain_types import FetchResult, QuoteRequestConfig
from motivation_api.infrastructure.gemini_client import ResilientGeminiClient
from motivation_api.schemas.quote import FallbackQuoteResponse, QuoteResponse

logger = logging.getLogger(__name__)


def build_motivation_response(
    result: FetchResult,
) -> tuple[int, QuoteResponse | FallbackQuoteResponse]:
    if result.ok:
        return status.HTTP_200_OK, QuoteResponse.from_quote(result.quote)
    logger.error(
        "Serving fallback quote",
        extra={
            "attempt": result.attempts,
            "error_code": (
                "DEADLINE_EXCEEDED" if result.failure.deadline_exceeded
                else "RETRIES_EXHAUSTED"
            ),
        },
    )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, FallbackQuoteResponse()


async def get_motivation(
    client: ResilientGeminiClient, config: QuoteRequestConfig,
) -> tuple[int, QuoteResponse | FallbackQuoteResponse]:
    """Fetch one quote and map it to (status, body)."""
    result = await client.fetch_quote(config)
    return build_motivation_response(result)
