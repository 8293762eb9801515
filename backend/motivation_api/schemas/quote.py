"""Quote Schemas: JSON bodies returned by GET /api/motivation.

Invariants:
    - QuoteResponse fields are non-empty (mirrors the Quote invariant)
    - FallbackQuoteResponse carries fixed sentinel text plus an error message
"""

from pydantic import BaseModel, Field

from motivation_api.core.domain_types import Quote


FALLBACK_ERROR = "Failed to fetch motivation from the Gemini API."
FALLBACK_QUOTE = (
    "Error: The dynamic quote engine is temporarily unavailable. Try again!"
)
FALLBACK_AUTHOR = "The Server Ghost"


class QuoteResponse(BaseModel):
    """Successful quote."""
    quote: str = Field(min_length=1)
    author: str = Field(min_length=1)

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(quote=quote.quote, author=quote.author)


class FallbackQuoteResponse(BaseModel):
    """Sentinel payload sent with 500 when every attempt failed."""
    error: str = FALLBACK_ERROR
    quote: str = FALLBACK_QUOTE
    author: str = FALLBACK_AUTHOR


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
