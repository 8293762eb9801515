"""Quote Payload: builds the generateContent request and parses its response.

Invariants:
    - build_request_payload is PURE: same config → equal payload, fresh dict each call
    - parse_quote_response parses twice: the JSON envelope, then the JSON text
      nested at candidates[0].content.parts[0].text
    - Any shape violation raises MalformedResponseError or IncompleteQuoteError;
      a partially populated Quote is never returned
"""

import copy
import json
from typing import Any

from motivation_api.core.domain_types import Quote, QuoteRequestConfig
from motivation_api.core.errors import IncompleteQuoteError, MalformedResponseError
from motivation_api.core.quote_prompt import REQUIRED_FIELDS


def build_request_payload(config: QuoteRequestConfig) -> dict:
    """Gemini generateContent body requesting JSON constrained to the schema."""
    return {
        "contents": [{"parts": [{"text": config.prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": copy.deepcopy(config.response_schema),
        },
    }


def extract_candidate_text(envelope: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise MalformedResponseError."""
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise MalformedResponseError(
            "Gemini API returned an unexpected or empty response structure.",
        )
    if not isinstance(text, str) or not text:
        raise MalformedResponseError("Invalid API response format.")
    return text


def parse_quote_text(text: str) -> Quote:
    """Parse the nested JSON string into a Quote."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedResponseError(f"Quote text is not valid JSON: {e}")
    if not isinstance(data, dict):
        raise MalformedResponseError("Quote text is not a JSON object")

    missing = [
        name for name in REQUIRED_FIELDS
        if not isinstance(data.get(name), str) or not data[name].strip()
    ]
    if missing:
        raise IncompleteQuoteError(missing)
    return Quote(quote=data["quote"], author=data["author"])


def parse_quote_response(body: str | bytes) -> Quote:
    """Full response body → Quote."""
    try:
        envelope = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise MalformedResponseError(f"Response body is not valid JSON: {e}")
    return parse_quote_text(extract_candidate_text(envelope))
