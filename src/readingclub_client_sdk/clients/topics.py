from __future__ import annotations

from typing import Any, Mapping

from .. import endpoints
from ..models import CursorPageResponse, JsonObject, TopicLikeResult
from .base import BaseClient

TOPICS_PAGE_SIZE = 5


class TopicsClient(BaseClient):
    async def proposed(
        self,
        gathering_id: int,
        meeting_id: int,
        *,
        page_size: int = TOPICS_PAGE_SIZE,
        cursor_like_count: int | None = None,
        cursor_topic_id: int | None = None,
    ) -> CursorPageResponse[JsonObject, JsonObject]:
        params = {
            "pageSize": page_size,
            "cursorLikeCount": cursor_like_count,
            "cursorTopicId": cursor_topic_id,
        }
        return await self._request(
            "GET",
            endpoints.topics(gathering_id, meeting_id),
            params=params,
            model=CursorPageResponse[JsonObject, JsonObject],
        )

    async def confirmed(
        self,
        gathering_id: int,
        meeting_id: int,
        *,
        page_size: int = TOPICS_PAGE_SIZE,
        cursor_confirm_order: int | None = None,
        cursor_topic_id: int | None = None,
    ) -> CursorPageResponse[JsonObject, JsonObject]:
        params = {
            "pageSize": page_size,
            "cursorConfirmOrder": cursor_confirm_order,
            "cursorTopicId": cursor_topic_id,
        }
        return await self._request(
            "GET",
            endpoints.confirmed_topics(gathering_id, meeting_id),
            params=params,
            model=CursorPageResponse[JsonObject, JsonObject],
        )

    async def create(self, gathering_id: int, meeting_id: int, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("POST", endpoints.topics(gathering_id, meeting_id), dict(payload)) or {}

    async def delete(self, gathering_id: int, meeting_id: int, topic_id: int) -> None:
        await self._request("DELETE", endpoints.topic(gathering_id, meeting_id, topic_id))

    async def toggle_like(self, gathering_id: int, meeting_id: int, topic_id: int) -> TopicLikeResult:
        path = endpoints.topic_likes(gathering_id, meeting_id, topic_id)
        return await self._request("POST", path, model=TopicLikeResult)
