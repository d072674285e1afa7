from __future__ import annotations

from .. import endpoints
from ..models import JsonObject, PreOpinionAnswers
from .base import BaseClient


class PreOpinionsClient(BaseClient):
    async def answers(self, gathering_id: int, meeting_id: int) -> PreOpinionAnswers:
        """Every member's book rating and topic answers for one meeting."""
        path = endpoints.pre_opinion_answers(gathering_id, meeting_id)
        return await self._request("GET", path, model=PreOpinionAnswers)

    async def delete_my_answer(self, gathering_id: int, meeting_id: int) -> None:
        await self._request("DELETE", endpoints.my_pre_opinion_answer(gathering_id, meeting_id))

    async def my_pre_opinion(self, meeting_id: int) -> JsonObject:
        # response shape is still open on the server side, so it stays a plain dict
        return await self._request("GET", endpoints.my_pre_opinion(meeting_id)) or {}
