from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import httpx

from .exceptions import ClientError
from .request_context import AttemptContext, RequestConfig

RequestHook = Callable[[RequestConfig], "RequestConfig | Awaitable[RequestConfig]"]
ResponseHook = Callable[[httpx.Response, AttemptContext], "httpx.Response | Awaitable[httpx.Response]"]
ErrorHook = Callable[[Exception, AttemptContext], "httpx.Response | Awaitable[httpx.Response]"]
Send = Callable[[AttemptContext], Awaitable[httpx.Response]]


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass(frozen=True)
class ResponseHandler:
    on_response: ResponseHook | None = None
    on_error: ErrorHook | None = None


class InterceptorPipeline:
    """Ordered request/response hooks around a transport call.

    Outbound hooks run in registration order. Inbound handlers run in reverse
    registration order: the last registered handler sees the transport result
    first. A handler that returns a response fulfils the chain; one that
    raises a :class:`ClientError` rejects it and the next handler's
    ``on_error`` gets the error. Other exceptions propagate immediately.
    """

    def __init__(self) -> None:
        self._request_hooks: list[RequestHook] = []
        self._response_handlers: list[ResponseHandler] = []

    @property
    def request_hooks(self) -> tuple[RequestHook, ...]:
        return tuple(self._request_hooks)

    @property
    def response_handlers(self) -> tuple[ResponseHandler, ...]:
        return tuple(self._response_handlers)

    def use_request(self, hook: RequestHook) -> int:
        self._request_hooks.append(hook)
        return len(self._request_hooks) - 1

    def use_response(
        self,
        on_response: ResponseHook | None = None,
        on_error: ErrorHook | None = None,
    ) -> int:
        if on_response is None and on_error is None:
            raise ValueError("A response handler needs on_response, on_error or both")
        self._response_handlers.append(ResponseHandler(on_response=on_response, on_error=on_error))
        return len(self._response_handlers) - 1

    def clear(self) -> None:
        self._request_hooks.clear()
        self._response_handlers.clear()

    async def run_outbound(self, request: RequestConfig) -> RequestConfig:
        for hook in self._request_hooks:
            request = await _resolve(hook(request))
        return request

    async def execute(self, attempt: AttemptContext, send: Send) -> httpx.Response:
        attempt = attempt.with_request(await self.run_outbound(attempt.request))

        response: httpx.Response | None = None
        error: Exception | None = None
        try:
            response = await send(attempt)
        except ClientError as exc:
            error = exc

        for handler in reversed(self._response_handlers):
            try:
                if error is None:
                    if handler.on_response is not None:
                        response = await _resolve(handler.on_response(response, attempt))
                elif handler.on_error is not None:
                    response = await _resolve(handler.on_error(error, attempt))
                    error = None
            except ClientError as exc:
                error = exc

        if error is not None:
            raise error
        if response is None:
            raise ClientError(f"No response for {attempt.request.method} {attempt.request.path}")
        return response
