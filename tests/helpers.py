from __future__ import annotations

import httpx

BASE_URL = "https://api.readingclub.test"


class ScriptedTransport:
    """Answers requests from a fixed script of responses or transport errors."""

    def __init__(self, results):
        self.results = list(results)
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.results:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def envelope(data=None, code: str = "SUCCESS", message: str = "ok", status: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(status, json={"code": code, "message": message, "data": data}, **kwargs)


def error_envelope(status: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(status, json={"code": code, "message": message, "data": None})
