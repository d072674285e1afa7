from __future__ import annotations

from urllib.parse import urlencode

from .. import endpoints
from ..config import ConfigError
from ..models import CurrentUser
from .base import BaseClient


class AuthClient(BaseClient):
    async def me(self) -> CurrentUser:
        """Probe the session. A 401 comes back as ``UnauthorizedError`` without a redirect."""
        return await self._request("GET", endpoints.AUTH_ME, model=CurrentUser)

    async def logout(self) -> None:
        await self._request("POST", endpoints.AUTH_LOGOUT)
        self.http.clear_credentials()

    def kakao_login_url(self) -> str:
        api_url = self.http.config.api_base_url
        app_url = self.http.config.app_url
        if not api_url or not app_url:
            raise ConfigError("Missing required config values: READINGCLUB_API_BASE_URL or READINGCLUB_APP_URL")
        query = urlencode({"fe_origin": app_url})
        return f"{api_url}{endpoints.KAKAO_AUTHORIZATION}?{query}"
