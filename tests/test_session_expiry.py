import pytest

from readingclub_client_sdk.exceptions import ApiError, UnauthorizedError
from readingclub_client_sdk.session_expiry import (
    AUTH_PROBE_PATHS,
    LocationNavigator,
    SessionExpiryRouter,
    is_auth_probe,
)


def _unauthorized() -> ApiError:
    return UnauthorizedError(code="G102", message="인증이 필요합니다.", status=401)


@pytest.mark.parametrize(
    "path",
    ["/api/auth/me", "/api/users/me", "/api/users/me?fields=nickname", "https://api.test/api/auth/me"],
)
def test_probe_paths_match_exactly_or_by_suffix(path) -> None:
    assert is_auth_probe(path)


@pytest.mark.parametrize("path", ["/api/users/me/profile-image", "/api/auth/logout", "/api/book"])
def test_other_paths_are_not_probes(path) -> None:
    assert not is_auth_probe(path)


def test_default_probe_paths() -> None:
    assert AUTH_PROBE_PATHS == ("/api/auth/me", "/api/users/me")


def test_redirects_on_401() -> None:
    navigator = LocationNavigator(path="/gatherings/3")
    router = SessionExpiryRouter(navigator)

    assert router.handle(_unauthorized(), "/api/gatherings/3") is True
    assert navigator.current_path() == "/login"
    assert navigator.history == ["/login"]


def test_probe_401_is_left_to_caller() -> None:
    navigator = LocationNavigator(path="/")
    router = SessionExpiryRouter(navigator)

    assert router.handle(_unauthorized(), "/api/auth/me") is False
    assert navigator.history == []


def test_repeated_401s_navigate_once() -> None:
    navigator = LocationNavigator(path="/books")
    router = SessionExpiryRouter(navigator)

    results = [router.handle(_unauthorized(), path) for path in ("/api/book", "/api/gatherings", "/api/meetings/1")]

    assert results == [True, False, False]
    assert navigator.history == ["/login"]


def test_non_401_never_redirects() -> None:
    navigator = LocationNavigator(path="/books")
    router = SessionExpiryRouter(navigator)
    forbidden = ApiError(code="G101", message="접근 권한이 없습니다.", status=403)

    assert router.handle(forbidden, "/api/book") is False
    assert navigator.history == []


def test_custom_login_path_and_probes() -> None:
    seen: list[str] = []
    navigator = LocationNavigator(path="/", on_navigate=seen.append)
    router = SessionExpiryRouter(navigator, login_path="/signin", probe_paths=("/api/session",))

    assert router.handle(_unauthorized(), "/api/session") is False
    assert router.handle(_unauthorized(), "/api/auth/me") is True
    assert seen == ["/signin"]
