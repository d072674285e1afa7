from .config import ClientConfig, ConfigError, load_config, load_retry_policy
from .cookie_store import CookieStore
from .error_codes import ERROR_CATALOG, ErrorCode, ErrorDomain, message_for
from .error_mapper import ErrorNormalizer, map_error, normalize_failure
from .exceptions import (
    ApiError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RequestFailure,
    ServerError,
    UnauthorizedError,
)
from .http_client import HttpClient
from .interceptors import InterceptorPipeline
from .logger import RequestLogger, configure_logging
from .models import ApiErrorResponse, ApiResponse, CursorPageResponse, PageResponse
from .request_context import AttemptContext, RequestConfig
from .retry import IDEMPOTENT_METHODS, RetryInterceptor, RetryPolicy, backoff_delay_ms, should_retry
from .session import ApiSession
from .session_expiry import AUTH_PROBE_PATHS, LocationNavigator, Navigator, SessionExpiryRouter

__all__ = [
    "AUTH_PROBE_PATHS",
    "ApiError",
    "ApiErrorResponse",
    "ApiResponse",
    "ApiSession",
    "AttemptContext",
    "ClientConfig",
    "ClientError",
    "ConfigError",
    "ConflictError",
    "CookieStore",
    "CursorPageResponse",
    "ERROR_CATALOG",
    "ErrorCode",
    "ErrorDomain",
    "ErrorNormalizer",
    "ForbiddenError",
    "HttpClient",
    "IDEMPOTENT_METHODS",
    "InterceptorPipeline",
    "LocationNavigator",
    "Navigator",
    "NetworkError",
    "NotFoundError",
    "PageResponse",
    "RequestConfig",
    "RequestFailure",
    "RequestLogger",
    "RetryInterceptor",
    "RetryPolicy",
    "ServerError",
    "SessionExpiryRouter",
    "UnauthorizedError",
    "backoff_delay_ms",
    "configure_logging",
    "load_config",
    "load_retry_policy",
    "map_error",
    "message_for",
    "normalize_failure",
    "should_retry",
]
