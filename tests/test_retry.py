import httpx
import pytest

from readingclub_client_sdk.exceptions import RequestFailure
from readingclub_client_sdk.request_context import AttemptContext, RequestConfig
from readingclub_client_sdk.retry import (
    IDEMPOTENT_METHODS,
    RetryInterceptor,
    RetryPolicy,
    backoff_delay_ms,
    should_retry,
)
from tests.helpers import SleepRecorder


def _failure(method: str = "GET", status: int | None = 503, retry_count: int = 0) -> RequestFailure:
    attempt = AttemptContext(RequestConfig(method=method, path="/api/book"), retry_count=retry_count)
    response = httpx.Response(status) if status is not None else None
    return RequestFailure("failed", attempt, response)


def test_backoff_doubles_per_attempt() -> None:
    assert [backoff_delay_ms(n, 1000) for n in range(4)] == [1000, 2000, 4000, 8000]
    assert backoff_delay_ms(2, 250) == 1000


def test_idempotent_methods() -> None:
    assert IDEMPOTENT_METHODS == {"GET", "HEAD", "OPTIONS", "PUT"}


@pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS", "PUT"])
def test_idempotent_methods_retry_on_retryable_status(method) -> None:
    assert should_retry(_failure(method, 502), RetryPolicy()) is True


@pytest.mark.parametrize("method", ["POST", "PATCH", "DELETE"])
@pytest.mark.parametrize("status", [None, 500, 503])
def test_non_idempotent_methods_never_retry(method, status) -> None:
    assert should_retry(_failure(method, status), RetryPolicy()) is False


def test_missing_response_is_always_retryable() -> None:
    assert should_retry(_failure("GET", None), RetryPolicy(retryable_statuses=frozenset())) is True


@pytest.mark.parametrize("status", [400, 401, 404, 409, 501])
def test_non_retryable_statuses(status) -> None:
    assert should_retry(_failure("GET", status), RetryPolicy()) is False


def test_policy_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        RetryPolicy(max_retries=-1)
    with pytest.raises(ValueError):
        RetryPolicy(base_delay_ms=-5)


def test_policy_normalizes_statuses_to_frozenset() -> None:
    policy = RetryPolicy(retryable_statuses={429, 503})

    assert policy.retryable_statuses == frozenset({429, 503})


def test_next_attempt_leaves_original_untouched() -> None:
    first = AttemptContext(RequestConfig(method="GET", path="/api/book"))

    second = first.next_attempt()

    assert first.retry_count == 0
    assert second.retry_count == 1
    assert second.request is first.request


@pytest.mark.asyncio
async def test_interceptor_reissues_with_incremented_count() -> None:
    reissued: list[AttemptContext] = []
    sleeps = SleepRecorder()

    async def reissue(attempt):
        reissued.append(attempt)
        return httpx.Response(200)

    interceptor = RetryInterceptor(reissue, sleep=sleeps)
    failure = _failure(retry_count=1)

    response = await interceptor.on_error(failure, failure.attempt)

    assert response.status_code == 200
    assert [attempt.retry_count for attempt in reissued] == [2]
    assert sleeps.calls == [2.0]


@pytest.mark.asyncio
async def test_interceptor_stops_at_ceiling() -> None:
    async def reissue(attempt):
        raise AssertionError("must not re-issue past the ceiling")

    interceptor = RetryInterceptor(reissue, RetryPolicy(max_retries=2), sleep=SleepRecorder())
    failure = _failure(retry_count=2)

    with pytest.raises(RequestFailure) as excinfo:
        await interceptor.on_error(failure, failure.attempt)

    assert excinfo.value is failure


@pytest.mark.asyncio
async def test_interceptor_passes_through_other_errors() -> None:
    async def reissue(attempt):
        raise AssertionError("unexpected re-issue")

    interceptor = RetryInterceptor(reissue, sleep=SleepRecorder())
    error = ValueError("not a transport failure")

    with pytest.raises(ValueError):
        await interceptor.on_error(error, _failure().attempt)
