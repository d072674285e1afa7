from __future__ import annotations

import httpx
import pytest

from readingclub_client_sdk.config import ClientConfig
from readingclub_client_sdk.http_client import HttpClient
from readingclub_client_sdk.session_expiry import LocationNavigator
from tests.helpers import BASE_URL, ScriptedTransport, SleepRecorder


@pytest.fixture
def navigator() -> LocationNavigator:
    return LocationNavigator(path="/gatherings")


@pytest.fixture
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_client(navigator, sleeps):
    def _make(results, *, config: ClientConfig | None = None, policy=None, cookie_store=None):
        transport = ScriptedTransport(results)
        client = HttpClient(
            config or ClientConfig(api_base_url=BASE_URL),
            retry_policy=policy,
            navigator=navigator,
            transport=httpx.MockTransport(transport),
            cookie_store=cookie_store,
            sleep=sleeps,
        )
        return client, transport

    return _make
