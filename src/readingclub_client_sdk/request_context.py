from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class RequestConfig:
    method: str
    path: str
    json_body: Any | None = None
    params: Mapping[str, Any] | None = None
    headers: Mapping[str, str | None] = field(default_factory=dict)
    files: Mapping[str, Any] | None = None
    data: Mapping[str, Any] | None = None
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    def with_headers(self, headers: Mapping[str, str | None]) -> RequestConfig:
        return replace(self, headers={**self.headers, **headers})


@dataclass(frozen=True)
class AttemptContext:
    """One try of a logical request.

    ``retry_count`` belongs to this attempt only; a re-issue gets a fresh
    context from :meth:`next_attempt`, so concurrent requests never share it.
    """

    request: RequestConfig
    retry_count: int = 0

    def next_attempt(self) -> AttemptContext:
        return replace(self, retry_count=self.retry_count + 1)

    def with_request(self, request: RequestConfig) -> AttemptContext:
        return replace(self, request=request)
