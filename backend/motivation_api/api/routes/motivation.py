"""Motivation Route: GET /api/motivation returns one freshly generated quote.

Invariants:
    - Always answers with a JSON body: 200 {quote, author} or 500 fallback
    - No parameters, no request body, no client authentication
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from motivation_api.api.dependencies import get_gemini_client, get_quote_config
from motivation_api.core.domain_types import QuoteRequestConfig
from motivation_api.infrastructure.gemini_client import ResilientGeminiClient
from motivation_api.schemas.quote import FallbackQuoteResponse, QuoteResponse
from motivation_api.services.motivation import get_motivation

router = APIRouter(prefix="/api", tags=["motivation"])


@router.get(
    "/motivation",
    response_model=QuoteResponse,
    responses={500: {"model": FallbackQuoteResponse}},
)
async def motivation(
    client: ResilientGeminiClient = Depends(get_gemini_client),
    config: QuoteRequestConfig = Depends(get_quote_config),
):
    """Fetch a motivational quote from Gemini."""
    status_code, body = await get_motivation(client, config)
    return JSONResponse(status_code=status_code, content=body.model_dump())
