from __future__ import annotations

import json
from typing import Any

from .. import endpoints
from ..error_codes import SUCCESS_CODE, ErrorCode
from ..exceptions import ApiError
from ..models import NicknameCheckResult, User
from .base import BaseClient

# (filename, content, content_type) as accepted by httpx
FileTuple = tuple[str, Any, str]


class UsersClient(BaseClient):
    async def me(self) -> User:
        return await self._request("GET", endpoints.USER_ME, model=User)

    async def delete_me(self) -> None:
        await self._request("DELETE", endpoints.USER_ME)
        self.http.clear_credentials()

    async def check_nickname(self, nickname: str) -> NicknameCheckResult:
        try:
            envelope = await self.http.fetch_envelope(
                "GET",
                endpoints.USER_CHECK_NICKNAME,
                params={"nickname": nickname},
            )
        except ApiError as exc:
            # only a duplicate means "taken"; anything else is a real failure
            if exc.matches(ErrorCode.NICKNAME_ALREADY_EXISTS):
                return NicknameCheckResult(available=False)
            raise
        return NicknameCheckResult(available=envelope is not None and envelope.code == SUCCESS_CODE)

    async def update_nickname(self, nickname: str) -> User:
        return await self._request("PATCH", endpoints.USER_ME, {"nickname": nickname}, model=User)

    async def complete_onboarding(self, nickname: str, profile_image: FileTuple | None = None) -> User:
        files: dict[str, Any] = {
            "request": (None, json.dumps({"nickname": nickname}, ensure_ascii=False), "application/json"),
        }
        if profile_image is not None:
            files["profileImage"] = profile_image
        return await self._request("PATCH", endpoints.USER_ONBOARDING, files=files, model=User)

    async def update_profile_image(self, profile_image: FileTuple) -> User:
        return await self._request(
            "PATCH",
            endpoints.USER_PROFILE_IMAGE,
            files={"profileImage": profile_image},
            model=User,
        )

    async def delete_profile_image(self) -> None:
        await self._request("DELETE", endpoints.USER_PROFILE_IMAGE)
