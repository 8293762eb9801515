"""Domain Types: verifies value-object invariants.

Tests:
    - Quote rejects empty or non-string fields
    - QuoteRequestConfig defaults and backoff schedule
    - FetchResult holds exactly one of quote / failure
"""

import pytest

from motivation_api.core.domain_types import (
    DEFAULT_GEMINI_API_URL,
    AttemptFailure,
    AttemptOutcome,
    FetchResult,
    Quote,
    QuoteRequestConfig,
)


def test_quote_requires_non_empty_fields():
    with pytest.raises(ValueError):
        Quote(quote="", author="Anon")
    with pytest.raises(ValueError):
        Quote(quote="Do it.", author="  ")


def test_quote_is_immutable():
    quote = Quote(quote="Do it.", author="Anon")
    with pytest.raises(AttributeError):
        quote.author = "Someone"


def test_config_defaults():
    config = QuoteRequestConfig()
    assert config.api_url == DEFAULT_GEMINI_API_URL
    assert config.max_attempts == 5
    assert config.timeout_seconds == 10.0
    assert config.base_delay_ms == 1000
    assert config.deadline_seconds is None


def test_backoff_doubles_per_attempt():
    config = QuoteRequestConfig()
    assert [config.backoff_ms(i) for i in range(5)] == [1000, 2000, 4000, 8000, 16000]


def test_config_rejects_zero_attempts():
    with pytest.raises(ValueError):
        QuoteRequestConfig(max_attempts=0)


def test_config_rejects_non_positive_deadline():
    with pytest.raises(ValueError):
        QuoteRequestConfig(deadline_seconds=0)


def test_fetch_result_success():
    result = FetchResult.success(Quote("Do it.", "Anon"), attempts=2)
    assert result.ok
    assert result.attempts == 2
    assert result.failure is None


def test_fetch_result_exhausted():
    failures = [
        AttemptFailure(1, AttemptOutcome.TIMEOUT, "timed out"),
        AttemptFailure(2, AttemptOutcome.HTTP_STATUS, "HTTP error! status: 500"),
    ]
    result = FetchResult.exhausted(failures)
    assert not result.ok
    assert result.attempts == 2
    assert result.failure.last_message == "HTTP error! status: 500"
    assert result.failure.deadline_exceeded is False


def test_fetch_result_needs_exactly_one_outcome():
    with pytest.raises(ValueError):
        FetchResult(attempts=1)
