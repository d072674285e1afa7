from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..http_client import HttpClient


@dataclass
class BaseClient:
    http: HttpClient

    async def _request(self, method: str, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return await self.http.request(method, path, body, **kwargs)
