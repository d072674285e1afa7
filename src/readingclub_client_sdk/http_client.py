from __future__ import annotations

import asyncio
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any, Mapping

import httpx
from pydantic import TypeAdapter

from .config import ClientConfig
from .cookie_store import CookieStore
from .error_codes import UNKNOWN_ERROR_CODE
from .error_mapper import ErrorNormalizer
from .exceptions import ApiError, RequestFailure
from .interceptors import InterceptorPipeline
from .logger import RequestLogger
from .models import ApiResponse
from .request_context import AttemptContext, RequestConfig
from .retry import RetryInterceptor, RetryPolicy, Sleep
from .session_expiry import LocationNavigator, Navigator, SessionExpiryRouter


def _blocking_jar() -> CookieJar:
    # allowed_domains=[] refuses to store or send any cookie
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


class HttpClient:
    """Shared async client for the reading-club API.

    Callers get the ``data`` of the response envelope or an :class:`ApiError`.
    The interceptor chain (request logging, error normalization with session
    expiry routing, idempotent retry) is installed once per instance.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        retry_policy: RetryPolicy | None = None,
        navigator: Navigator | None = None,
        logger: RequestLogger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        cookie_store: CookieStore | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.config = config
        self.retry_policy = retry_policy or RetryPolicy()
        self.navigator = navigator or LocationNavigator()
        self.logger = logger or RequestLogger(enabled=config.debug)
        self.pipeline = InterceptorPipeline()
        self._sleep = sleep
        self._cookie_store = cookie_store if config.sends_credentials else None
        self._interceptors_installed = False
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url,
            timeout=config.timeout_seconds,
            transport=transport,
            cookies=self._initial_cookies(),
        )
        self.setup_interceptors()

    def _initial_cookies(self) -> httpx.Cookies | CookieJar:
        if not self.config.sends_credentials:
            return _blocking_jar()
        if self._cookie_store is not None:
            return self._cookie_store.load()
        return httpx.Cookies()

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    def setup_interceptors(self) -> None:
        if self._interceptors_installed:
            return

        self.pipeline.use_request(self.logger.request)

        router = SessionExpiryRouter(self.navigator, login_path=self.config.login_path)
        normalizer = ErrorNormalizer(self.logger, router)
        self.pipeline.use_response(normalizer.on_response, normalizer.on_error)

        # registered last so it runs first and sees the raw failure
        retry = RetryInterceptor(self.send, self.retry_policy, logger=self.logger, sleep=self._sleep)
        self.pipeline.use_response(on_error=retry.on_error)

        self._interceptors_installed = True

    async def send(self, attempt: AttemptContext) -> httpx.Response:
        return await self.pipeline.execute(attempt, self._send_once)

    async def _send_once(self, attempt: AttemptContext) -> httpx.Response:
        request = attempt.request
        kwargs: dict[str, Any] = {
            "params": request.params,
            "headers": self._merge_headers(request),
        }
        if request.files is not None:
            kwargs["files"] = request.files
            kwargs["data"] = request.data
        elif request.data is not None:
            kwargs["data"] = request.data
        elif request.json_body is not None:
            kwargs["json"] = request.json_body
        if request.timeout_seconds is not None:
            kwargs["timeout"] = request.timeout_seconds

        try:
            response = await self._client.request(request.method, request.path, **kwargs)
        except httpx.TimeoutException as exc:
            timeout = request.timeout_seconds or self.config.timeout_seconds
            raise RequestFailure(f"timeout of {timeout}s exceeded", attempt) from exc
        except httpx.RequestError as exc:
            raise RequestFailure(str(exc) or type(exc).__name__, attempt) from exc

        if not response.is_success:
            raise RequestFailure(
                f"Request failed with status code {response.status_code}",
                attempt,
                response,
            )
        return response

    def _merge_headers(self, request: RequestConfig) -> dict[str, str]:
        merged: dict[str, str | None] = dict(self.config.default_headers)
        if request.files is not None:
            # httpx sets the multipart boundary itself
            merged = {key: value for key, value in merged.items() if key.lower() != "content-type"}
        for key, value in request.headers.items():
            merged = {name: existing for name, existing in merged.items() if name.lower() != key.lower()}
            merged[key] = value
        return {key: value for key, value in merged.items() if value is not None}

    async def fetch_envelope(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str | None] | None = None,
        files: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> ApiResponse[Any] | None:
        request = RequestConfig(
            method=method,
            path=path,
            json_body=body,
            params=_drop_none(params),
            headers=dict(headers or {}),
            files=files,
            data=data,
            timeout_seconds=timeout,
        )
        response = await self.send(AttemptContext(request))
        return _parse_envelope(response)

    async def request(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        *,
        model: Any | None = None,
        **kwargs: Any,
    ) -> Any:
        envelope = await self.fetch_envelope(method, path, body, **kwargs)
        if envelope is None:
            return None
        if model is None or envelope.data is None:
            return envelope.data
        return TypeAdapter(model).validate_python(envelope.data)

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return await self.request("POST", path, body, **kwargs)

    async def put(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return await self.request("PUT", path, body, **kwargs)

    async def patch(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, body, **kwargs)

    async def delete(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, body, **kwargs)

    def clear_credentials(self) -> None:
        self._client.cookies.clear()
        if self._cookie_store is not None:
            self._cookie_store.clear()

    async def aclose(self) -> None:
        try:
            if self._cookie_store is not None:
                self._cookie_store.save(self._client.cookies)
        finally:
            await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _drop_none(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _parse_envelope(response: httpx.Response) -> ApiResponse[Any] | None:
    if not response.content:
        return None
    try:
        return ApiResponse[Any].model_validate(response.json())
    except ValueError as exc:
        raise ApiError(
            code=UNKNOWN_ERROR_CODE,
            message="Malformed response envelope",
            status=response.status_code,
        ) from exc
