from __future__ import annotations

from dataclasses import dataclass

import httpx

from .error_codes import DEFAULT_ERROR_MESSAGE, ErrorDomain, domain_for, message_for
from .request_context import AttemptContext


class ClientError(Exception):
    """Base of every error the SDK raises on purpose."""


class RequestFailure(ClientError):
    """Raw failure of one attempt, before normalization.

    ``response`` is ``None`` when nothing came back (DNS, refused connection,
    timeout).
    """

    def __init__(
        self,
        message: str,
        attempt: AttemptContext,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attempt = attempt
        self.response = response

    @property
    def method(self) -> str:
        return self.attempt.request.method

    @property
    def path(self) -> str:
        return self.attempt.request.path

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


@dataclass
class ApiError(ClientError):
    code: str
    message: str
    status: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status}] {self.code}: {self.message}"

    def matches(self, code: str) -> bool:
        return self.code == code

    def is_one_of(self, *codes: str) -> bool:
        return self.code in codes

    @property
    def user_message(self) -> str:
        registered = message_for(self.code)
        if registered:
            return registered
        if isinstance(self.message, str) and self.message.strip():
            return self.message
        return DEFAULT_ERROR_MESSAGE

    @property
    def domain(self) -> ErrorDomain | None:
        return domain_for(self.code)

    @property
    def is_unauthenticated(self) -> bool:
        return self.status == 401


class UnauthorizedError(ApiError):
    """401: the session is missing or expired."""


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ConflictError(ApiError):
    """409 or duplicate-style errors."""


class ServerError(ApiError):
    """5xx server-side failures."""


class NetworkError(ApiError):
    """No response was received (connection failure or timeout)."""
