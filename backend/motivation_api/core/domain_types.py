"""Domain Types: value objects passed between the fetcher, services and routes.

Invariants:
    - Quote fields are non-empty strings (enforced in __post_init__)
    - QuoteRequestConfig is frozen; the fetcher never reads ambient settings
    - FetchResult holds exactly one of quote / failure

Design Decisions:
    - Frozen dataclasses over Pydantic models: core/ stays free of validation
      framework imports, schemas/ owns the wire format
"""

from dataclasses import dataclass, field
from enum import Enum

from motivation_api.core.quote_prompt import QUOTE_PROMPT, QUOTE_RESPONSE_SCHEMA


DEFAULT_GEMINI_API_URL: str = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.5-flash-preview-09-2025:generateContent"
)


class AttemptOutcome(str, Enum):
    """Why a single attempt ended. Logged, never surfaced to the client."""
    TRANSPORT_ERROR = "transport_error"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    INCOMPLETE_QUOTE = "incomplete_quote"


@dataclass(frozen=True)
class Quote:
    """A motivational quote and its attributed author."""
    quote: str
    author: str

    def __post_init__(self):
        for name in ("quote", "author"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Quote.{name} must be a non-empty string")

    def to_dict(self) -> dict:
        return {"quote": self.quote, "author": self.author}


@dataclass(frozen=True)
class QuoteRequestConfig:
    """Everything one fetch_quote() invocation needs, passed explicitly."""
    api_url: str = DEFAULT_GEMINI_API_URL
    api_key: str = ""
    max_attempts: int = 5
    timeout_seconds: float = 10.0
    base_delay_ms: int = 1000
    deadline_seconds: float | None = None
    prompt: str = QUOTE_PROMPT
    response_schema: dict = field(
        default_factory=lambda: dict(QUOTE_RESPONSE_SCHEMA),
    )

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if self.base_delay_ms < 0:
            raise ValueError("base_delay_ms must be >= 0")
        if self.deadline_seconds is not None and self.deadline_seconds <= 0:
            raise ValueError("deadline_seconds must be > 0 when set")

    def backoff_ms(self, attempt: int) -> int:
        """Delay after failed 0-indexed attempt: 2^attempt * base_delay_ms."""
        return (2 ** attempt) * self.base_delay_ms


@dataclass(frozen=True)
class AttemptFailure:
    attempt: int  # 1-indexed
    outcome: AttemptOutcome
    message: str


@dataclass(frozen=True)
class FetchFailure:
    """Terminal 'no quote obtained'. Reasons are for logs only."""
    attempts: int
    failures: tuple[AttemptFailure, ...] = ()
    deadline_exceeded: bool = False

    @property
    def last_message(self) -> str | None:
        return self.failures[-1].message if self.failures else None


@dataclass(frozen=True)
class FetchResult:
    """Result of fetch_quote(): a Quote on success, a FetchFailure otherwise."""
    attempts: int
    quote: Quote | None = None
    failure: FetchFailure | None = None

    def __post_init__(self):
        if (self.quote is None) == (self.failure is None):
            raise ValueError("FetchResult needs exactly one of quote/failure")

    @property
    def ok(self) -> bool:
        return self.quote is not None

    @classmethod
    def success(cls, quote: Quote, attempts: int) -> "FetchResult":
        return cls(attempts=attempts, quote=quote)

    @classmethod
    def exhausted(
        cls,
        failures: list[AttemptFailure],
        deadline_exceeded: bool = False,
    ) -> "FetchResult":
        attempts = len(failures)
        return cls(
            attempts=attempts,
            failure=FetchFailure(
                attempts=attempts,
                failures=tuple(failures),
                deadline_exceeded=deadline_exceeded,
            ),
        )
