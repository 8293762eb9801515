"""Quote Prompt: the instruction and structured-output schema sent to Gemini.

Invariants:
    - QUOTE_RESPONSE_SCHEMA requires exactly two string fields: quote, author
    - Schema uses Gemini's OpenAPI subset (upper-case type names)
"""

QUOTE_PROMPT: str = (
    "Generate a new, original, and highly inspirational motivational quote "
    "and its author. Be creative and unique."
)

REQUIRED_FIELDS: tuple[str, ...] = ("quote", "author")

QUOTE_RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "quote": {
            "type": "STRING",
            "description": "A single, highly inspirational motivational quote.",
        },
        "author": {
            "type": "STRING",
            "description": "The attributed author of the quote.",
        },
    },
    "required": list(REQUIRED_FIELDS),
}
