from __future__ import annotations

from typing import Any, Literal, Mapping

from .. import endpoints
from ..models import JsonObject
from .base import BaseClient

ApproveType = Literal["ACTIVE", "REJECTED"]


class GatheringsClient(BaseClient):
    async def create(self, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("POST", endpoints.GATHERINGS, dict(payload)) or {}

    async def list_gatherings(self, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.GATHERINGS, params=params) or {}

    async def favorites(self) -> JsonObject:
        return await self._request("GET", endpoints.GATHERING_FAVORITES) or {}

    async def toggle_favorite(self, gathering_id: int) -> None:
        await self._request("PATCH", endpoints.gathering_favorite(gathering_id))

    async def detail(self, gathering_id: int) -> JsonObject:
        return await self._request("GET", endpoints.gathering_detail(gathering_id)) or {}

    async def update(self, gathering_id: int, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("PATCH", endpoints.gathering_detail(gathering_id), dict(payload)) or {}

    async def delete(self, gathering_id: int) -> None:
        await self._request("DELETE", endpoints.gathering_detail(gathering_id))

    async def by_invite_code(self, invitation_code: str) -> JsonObject:
        return await self._request("GET", endpoints.gathering_join_request(invitation_code)) or {}

    async def join(self, invitation_code: str) -> JsonObject:
        return await self._request("POST", endpoints.gathering_join_request(invitation_code)) or {}

    async def meetings(self, gathering_id: int, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.gathering_meetings(gathering_id), params=params) or {}

    async def books(self, gathering_id: int, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.gathering_books(gathering_id), params=params) or {}

    async def members(self, gathering_id: int, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.gathering_members(gathering_id), params=params) or {}

    async def meeting_tab_counts(self, gathering_id: int) -> JsonObject:
        params = {"gatheringId": gathering_id}
        return await self._request("GET", endpoints.MEETING_TAB_COUNTS, params=params) or {}

    async def handle_join_request(self, gathering_id: int, member_id: int, approve_type: ApproveType) -> None:
        path = endpoints.gathering_join_decision(gathering_id, member_id)
        await self._request("PATCH", path, {"approve_type": approve_type})

    async def remove_member(self, gathering_id: int, user_id: int) -> None:
        await self._request("DELETE", endpoints.gathering_member(gathering_id, user_id))
