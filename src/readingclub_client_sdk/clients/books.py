from __future__ import annotations

from typing import Any, Mapping

from .. import endpoints
from ..models import BookDetail, BookReview, JsonObject
from .base import BaseClient


class BooksClient(BaseClient):
    async def list_books(self, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.BOOK, params=params) or {}

    async def search(self, query: str, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.BOOK_SEARCH, params={"query": query, **params}) or {}

    async def create_book(self, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("POST", endpoints.BOOK, dict(payload)) or {}

    async def get_book(self, book_id: int) -> BookDetail:
        return await self._request("GET", endpoints.book_detail(book_id), model=BookDetail)

    async def delete_book(self, book_id: int) -> None:
        await self._request("DELETE", endpoints.book_detail(book_id))

    async def toggle_reading_status(self, book_id: int) -> BookDetail:
        return await self._request("POST", endpoints.book_toggle_reading(book_id), model=BookDetail)

    async def my_review(self, book_id: int) -> BookReview | None:
        data = await self._request("GET", endpoints.book_review_me(book_id))
        # the server answers an empty object when no review exists yet
        if not isinstance(data, dict) or not data.get("reviewId"):
            return None
        return BookReview.model_validate(data)

    async def create_review(self, book_id: int, payload: Mapping[str, Any]) -> BookReview:
        return await self._request("POST", endpoints.book_reviews(book_id), dict(payload), model=BookReview)

    async def review_history(self, book_id: int, **params: Any) -> JsonObject:
        return await self._request("GET", endpoints.book_review_history(book_id), params=params) or {}

    async def list_records(
        self,
        personal_book_id: int,
        *,
        gathering_id: int | None = None,
        record_type: str | None = None,
    ) -> JsonObject:
        params = {"gatheringId": gathering_id, "recordType": record_type}
        return await self._request("GET", endpoints.book_records(personal_book_id), params=params) or {}

    async def create_record(self, personal_book_id: int, payload: Mapping[str, Any]) -> JsonObject:
        return await self._request("POST", endpoints.book_records(personal_book_id), dict(payload)) or {}

    async def update_record(self, personal_book_id: int, record_id: int, payload: Mapping[str, Any]) -> JsonObject:
        path = endpoints.book_record(personal_book_id, record_id)
        return await self._request("PUT", path, dict(payload)) or {}

    async def delete_record(self, personal_book_id: int, record_id: int) -> None:
        await self._request("DELETE", endpoints.book_record(personal_book_id, record_id))
