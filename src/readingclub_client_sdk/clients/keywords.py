from __future__ import annotations

from .. import endpoints
from ..models import Keyword
from .base import BaseClient


class KeywordsClient(BaseClient):
    async def list_keywords(self) -> list[Keyword]:
        data = await self._request("GET", endpoints.KEYWORDS)
        if isinstance(data, dict):
            data = data.get("keywords", [])
        return [Keyword.model_validate(item) for item in data or []]
