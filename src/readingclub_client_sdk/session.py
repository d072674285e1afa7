from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from .clients.auth import AuthClient
from .clients.books import BooksClient
from .clients.gatherings import GatheringsClient
from .clients.keywords import KeywordsClient
from .clients.meetings import MeetingsClient
from .clients.pre_opinions import PreOpinionsClient
from .clients.topics import TopicsClient
from .clients.users import UsersClient
from .config import ClientConfig
from .cookie_store import CookieStore
from .http_client import HttpClient
from .logger import RequestLogger
from .retry import RetryPolicy
from .session_expiry import LocationNavigator, Navigator


@dataclass
class ApiSession:
    """Process-wide owner of the shared :class:`HttpClient`.

    Build one at start-up and hand out resource clients from it; every client
    shares the same interceptor chain, cookies and navigator.
    """

    config: ClientConfig
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    navigator: Navigator = field(default_factory=LocationNavigator)
    cookie_store: CookieStore | None = None
    logger: RequestLogger | None = None
    transport: httpx.AsyncBaseTransport | None = None
    http: HttpClient = field(init=False)

    def __post_init__(self) -> None:
        self.http = HttpClient(
            self.config,
            retry_policy=self.retry_policy,
            navigator=self.navigator,
            logger=self.logger,
            transport=self.transport,
            cookie_store=self.cookie_store,
        )

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http)

    def users_client(self) -> UsersClient:
        return UsersClient(http=self.http)

    def books_client(self) -> BooksClient:
        return BooksClient(http=self.http)

    def gatherings_client(self) -> GatheringsClient:
        return GatheringsClient(http=self.http)

    def meetings_client(self) -> MeetingsClient:
        return MeetingsClient(http=self.http)

    def topics_client(self) -> TopicsClient:
        return TopicsClient(http=self.http)

    def keywords_client(self) -> KeywordsClient:
        return KeywordsClient(http=self.http)

    def pre_opinions_client(self) -> PreOpinionsClient:
        return PreOpinionsClient(http=self.http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> ApiSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
