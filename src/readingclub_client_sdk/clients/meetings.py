from __future__ import annotations

from typing import Any, Mapping

from .. import endpoints
from ..models import JsonObject, PageResponse
from .base import BaseClient

MEETING_APPROVALS_PAGE_SIZE = 5


class MeetingsClient(BaseClient):
    async def approvals(
        self,
        gathering_id: int,
        status: str,
        *,
        page: int = 0,
        size: int = MEETING_APPROVALS_PAGE_SIZE,
        sort: str | None = None,
    ) -> PageResponse[JsonObject]:
        params = {"status": status, "page": page, "size": size, "sort": sort}
        return await self._request(
            "GET",
            endpoints.meeting_approvals(gathering_id),
            params=params,
            model=PageResponse[JsonObject],
        )

    async def detail(self, meeting_id: int) -> JsonObject:
        return await self._request("GET", endpoints.meeting_detail(meeting_id)) or {}

    async def create(self, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("POST", endpoints.MEETINGS, dict(payload)) or {}

    async def confirm(self, meeting_id: int) -> JsonObject:
        return await self._request("POST", endpoints.meeting_confirm(meeting_id)) or {}

    async def reject(self, meeting_id: int) -> JsonObject:
        return await self._request("POST", endpoints.meeting_reject(meeting_id)) or {}

    async def delete(self, meeting_id: int) -> None:
        await self._request("DELETE", endpoints.meeting_detail(meeting_id))

    async def join(self, meeting_id: int) -> JsonObject:
        return await self._request("POST", endpoints.meeting_join(meeting_id)) or {}

    async def cancel_join(self, meeting_id: int) -> None:
        await self._request("DELETE", endpoints.meeting_join(meeting_id))
