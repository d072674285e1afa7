from __future__ import annotations

import json
from typing import Mapping, NoReturn

import httpx

from .error_codes import UNKNOWN_ERROR_CODE
from .exceptions import (
    ApiError,
    ConflictError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RequestFailure,
    ServerError,
    UnauthorizedError,
)
from .logger import RequestLogger
from .request_context import AttemptContext
from .session_expiry import SessionExpiryRouter

NO_RESPONSE_STATUS = 500


def _error_class_for(status: int) -> type[ApiError]:
    if status == 401:
        return UnauthorizedError
    if status == 403:
        return ForbiddenError
    if status == 404:
        return NotFoundError
    if status == 409:
        return ConflictError
    if status >= 500:
        return ServerError
    return ApiError


def map_error(status: int, payload: Mapping[str, object] | None, fallback_message: str) -> ApiError:
    payload = payload or {}
    code = payload.get("code")
    message = payload.get("message")
    mapped = _error_class_for(status)
    return mapped(
        code=str(code) if code else UNKNOWN_ERROR_CODE,
        message=str(message) if message else fallback_message,
        status=status,
        raw_payload=dict(payload) if payload else None,
    )


def normalize_failure(failure: RequestFailure) -> ApiError:
    response = failure.response
    if response is None:
        return NetworkError(
            code=UNKNOWN_ERROR_CODE,
            message=failure.message,
            status=NO_RESPONSE_STATUS,
        )

    payload: Mapping[str, object] | None = None
    try:
        parsed = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        parsed = None
    if isinstance(parsed, Mapping):
        payload = parsed
    return map_error(response.status_code, payload, failure.message)


class ErrorNormalizer:
    """Terminal inbound hook: every failure leaves it as one :class:`ApiError`."""

    def __init__(self, logger: RequestLogger, router: SessionExpiryRouter | None = None) -> None:
        self._logger = logger
        self._router = router

    def on_response(self, response: httpx.Response, attempt: AttemptContext) -> httpx.Response:
        return self._logger.response(response, attempt)

    def on_error(self, error: Exception, attempt: AttemptContext) -> NoReturn:
        # already translated by the pipeline run of a re-issued attempt
        if isinstance(error, ApiError):
            raise error

        self._logger.error(error, attempt)
        if isinstance(error, RequestFailure):
            api_error = normalize_failure(error)
            request_path = error.path
        else:
            api_error = ApiError(code=UNKNOWN_ERROR_CODE, message=str(error), status=NO_RESPONSE_STATUS)
            request_path = attempt.request.path

        if self._router is not None:
            self._router.handle(api_error, request_path)
        raise api_error from error
