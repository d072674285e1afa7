from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .request_context import AttemptContext, RequestConfig

LOGGER_NAME = "readingclub_client_sdk.http"


def configure_logging(level: int = logging.DEBUG) -> None:
    logging.basicConfig(level=level, format="%(message)s")


def log_json(logger: logging.Logger, payload: dict, level: int = logging.DEBUG) -> None:
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


@dataclass
class RequestLogger:
    """Development diagnostics for the request pipeline.

    Every method is a no-op unless ``enabled`` is set, so production builds
    never emit request or payload details.
    """

    enabled: bool = False
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(LOGGER_NAME))

    def request(self, request: RequestConfig) -> RequestConfig:
        if self.enabled:
            log_json(
                self.logger,
                {
                    "ts": _now(),
                    "event": "api_request",
                    "method": request.method,
                    "path": request.path,
                    "params": request.params,
                    "body": request.json_body,
                },
            )
        return request

    def response(self, response: httpx.Response, attempt: AttemptContext) -> httpx.Response:
        if self.enabled:
            log_json(
                self.logger,
                {
                    "ts": _now(),
                    "event": "api_response",
                    "status": response.status_code,
                    "path": attempt.request.path,
                    "data": _response_body(response),
                },
            )
        return response

    def error(self, error: Exception, attempt: AttemptContext | None = None) -> None:
        if not self.enabled:
            return
        payload: dict[str, Any] = {
            "ts": _now(),
            "event": "api_error",
            "error_type": type(error).__name__,
            "error": str(error),
        }
        if attempt is not None:
            payload["method"] = attempt.request.method
            payload["path"] = attempt.request.path
            payload["retry_count"] = attempt.retry_count
        log_json(self.logger, payload, level=logging.ERROR)

    def retry(self, attempt: AttemptContext, *, delay_ms: int, reason: str) -> None:
        if self.enabled:
            log_json(
                self.logger,
                {
                    "ts": _now(),
                    "event": "api_retry",
                    "method": attempt.request.method,
                    "path": attempt.request.path,
                    "retry_count": attempt.retry_count,
                    "delay_ms": delay_ms,
                    "reason": reason,
                },
                level=logging.WARNING,
            )
