from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from .exceptions import ApiError

LOGIN_PATH = "/login"

# Callers of these endpoints ask "am I logged in?" and must get the 401 back
# instead of being redirected.
AUTH_PROBE_PATHS: tuple[str, ...] = ("/api/auth/me", "/api/users/me")


class Navigator(Protocol):
    def current_path(self) -> str: ...

    def navigate(self, path: str) -> None: ...


@dataclass
class LocationNavigator:
    """In-process location holder for apps without a browser."""

    path: str = "/"
    on_navigate: Callable[[str], None] | None = None
    history: list[str] = field(default_factory=list)

    def current_path(self) -> str:
        return self.path

    def navigate(self, path: str) -> None:
        self.history.append(path)
        self.path = path
        if self.on_navigate:
            self.on_navigate(path)


def is_auth_probe(path: str, probe_paths: tuple[str, ...] = AUTH_PROBE_PATHS) -> bool:
    request_path = path.split("?", 1)[0]
    return any(request_path == probe or request_path.endswith(probe) for probe in probe_paths)


class SessionExpiryRouter:
    def __init__(
        self,
        navigator: Navigator,
        *,
        login_path: str = LOGIN_PATH,
        probe_paths: tuple[str, ...] = AUTH_PROBE_PATHS,
    ) -> None:
        self.navigator = navigator
        self.login_path = login_path
        self.probe_paths = probe_paths

    def should_redirect(self, error: ApiError, request_path: str) -> bool:
        if not error.is_unauthenticated:
            return False
        # a burst of 401s from in-flight requests must navigate once
        if self.navigator.current_path() == self.login_path:
            return False
        return not is_auth_probe(request_path, self.probe_paths)

    def handle(self, error: ApiError, request_path: str) -> bool:
        if not self.should_redirect(error, request_path):
            return False
        self.navigator.navigate(self.login_path)
        return True
