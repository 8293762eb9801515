"""Resilient Gemini Client: fetches one structured quote with retry and backoff.

Invariants:
    - Attempts are strictly sequential; the payload is built once per fetch_quote()
    - Every QuoteAttemptError (transport, timeout, non-2xx, malformed, incomplete)
      counts as one failed attempt; none escapes fetch_quote()
    - Backoff after failed 0-indexed attempt i is 2^i * base_delay_ms, no jitter;
      no sleep after the final attempt
    - Optional deadline stops retrying when the next backoff would overrun it
    - fetch_quote() returns a FetchResult, it never raises for upstream failures

Design Decisions:
    - Shared httpx.AsyncClient injected by the lifespan; one per process, pooled
    - sleep and clock injectable so tests run without real delays
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

import httpx

from motivation_api.core.domain_types import (
    AttemptFailure, FetchResult, QuoteRequestConfig, Quote,
)
from motivation_api.core.errors import (
    ErrorContext, QuoteAttemptError, TransportError, UpstreamStatusError,
)
from motivation_api.core.quote_payload import (
    build_request_payload, parse_quote_response,
)

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Clock = Callable[[], float]


class ResilientGeminiClient:
    """Wraps httpx.AsyncClient with Gemini retry logic and error mapping."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = time.monotonic,
    ):
        self.http_client = http_client
        self._sleep = sleep
        self._clock = clock

    async def fetch_quote(self, config: QuoteRequestConfig) -> FetchResult:
        """Get one quote, retrying with exponential backoff until exhausted."""
        payload = build_request_payload(config)
        failures: list[AttemptFailure] = []
        started = self._clock()

        for attempt in range(config.max_attempts):
            try:
                quote = await self._attempt(config, payload, attempt)
                self._log_success(attempt, config.max_attempts)
                return FetchResult.success(quote, attempts=attempt + 1)
            except QuoteAttemptError as e:
                failures.append(
                    AttemptFailure(attempt + 1, e.outcome, e.message),
                )
                self._log_failure(e, attempt, config.max_attempts)

            if attempt == config.max_attempts - 1:
                break
            delay_ms = config.backoff_ms(attempt)
            if self._deadline_exceeded(config, started, delay_ms):
                logger.error(
                    "Quote deadline reached, giving up",
                    extra={"attempt": attempt + 1, "delay_ms": delay_ms},
                )
                return FetchResult.exhausted(failures, deadline_exceeded=True)
            logger.info(
                f"Retrying in {delay_ms / 1000:g} seconds...",
                extra={"attempt": attempt + 1, "delay_ms": delay_ms},
            )
            await self._sleep(delay_ms / 1000)

        logger.error(
            f"All {len(failures)} attempts to fetch a quote failed",
            extra={"max_attempts": config.max_attempts},
        )
        return FetchResult.exhausted(failures)

    async def _attempt(
        self, config: QuoteRequestConfig, payload: dict, attempt: int,
    ) -> Quote:
        """One POST + validation. Raises QuoteAttemptError on any failure."""
        try:
            response = await self.http_client.post(
                config.api_url,
                params={"key": config.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timed out after {config.timeout_seconds:g}s: {e}",
                timed_out=True,
                context=ErrorContext(attempt=attempt + 1),
            )
        except httpx.RequestError as e:
            raise TransportError(
                f"Transport failure: {e}",
                context=ErrorContext(attempt=attempt + 1),
            )

        if not response.is_success:
            raise UpstreamStatusError(
                response.status_code,
                context=ErrorContext(attempt=attempt + 1),
            )
        return parse_quote_response(response.content)

    def _deadline_exceeded(
        self, config: QuoteRequestConfig, started: float, delay_ms: int,
    ) -> bool:
        if config.deadline_seconds is None:
            return False
        elapsed = self._clock() - started
        return elapsed + delay_ms / 1000 > config.deadline_seconds

    def _log_success(self, attempt: int, max_attempts: int) -> None:
        logger.info(
            "Gemini quote fetched",
            extra={"attempt": attempt + 1, "max_attempts": max_attempts},
        )

    def _log_failure(
        self, e: QuoteAttemptError, attempt: int, max_attempts: int,
    ) -> None:
        logger.warning(
            f"Attempt {attempt + 1} failed: {e.message}",
            extra={
                "attempt": attempt + 1,
                "max_attempts": max_attempts,
                "error_code": e.code,
                "status_code": e.context.status_code,
            },
        )
