from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import httpx

from .exceptions import RequestFailure
from .logger import RequestLogger
from .request_context import AttemptContext

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT"})
DEFAULT_RETRYABLE_STATUSES = frozenset({500, 502, 503, 504})

Reissue = Callable[[AttemptContext], Awaitable[httpx.Response]]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 2
    base_delay_ms: int = 1000
    retryable_statuses: frozenset[int] = field(default_factory=lambda: DEFAULT_RETRYABLE_STATUSES)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.base_delay_ms < 0:
            raise ValueError(f"base_delay_ms must be >= 0, got {self.base_delay_ms}")
        object.__setattr__(self, "retryable_statuses", frozenset(self.retryable_statuses))


def backoff_delay_ms(retry_count: int, base_delay_ms: int) -> int:
    return base_delay_ms * (2**retry_count)


def should_retry(failure: RequestFailure, policy: RetryPolicy) -> bool:
    # POST/PATCH/DELETE could create or delete twice
    if failure.method not in IDEMPOTENT_METHODS:
        return False
    if failure.response is None:
        return True
    return failure.response.status_code in policy.retryable_statuses


class RetryInterceptor:
    """Inbound error hook that re-issues idempotent requests with backoff.

    Must be registered after the error normalizer so that it runs first and
    sees the raw :class:`RequestFailure` rather than a translated error.
    """

    def __init__(
        self,
        reissue: Reissue,
        policy: RetryPolicy | None = None,
        *,
        logger: RequestLogger | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._reissue = reissue
        self.policy = policy or RetryPolicy()
        self._logger = logger
        self._sleep = sleep

    async def on_error(self, error: Exception, attempt: AttemptContext) -> httpx.Response:
        if not isinstance(error, RequestFailure):
            raise error
        current = error.attempt
        if current.retry_count >= self.policy.max_retries or not should_retry(error, self.policy):
            raise error

        delay_ms = backoff_delay_ms(current.retry_count, self.policy.base_delay_ms)
        next_attempt = current.next_attempt()
        if self._logger:
            self._logger.retry(next_attempt, delay_ms=delay_ms, reason=error.message)
        await self._sleep(delay_ms / 1000)
        return await self._reissue(next_attempt)
