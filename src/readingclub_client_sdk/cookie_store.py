from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import httpx
from platformdirs import user_data_dir


@dataclass
class CookieStore:
    """Persists the server session cookies (``JSESSIONID``) between runs."""

    app_name: str = "readingclub"
    filename: str = "cookies.json"
    directory: Path | None = None

    def _path(self) -> Path:
        base = self.directory or Path(user_data_dir(self.app_name, "ReadingClub"))
        base.mkdir(parents=True, exist_ok=True)
        return base / self.filename

    def save(self, cookies: httpx.Cookies) -> None:
        records = [
            {
                "name": cookie.name,
                "value": cookie.value,
                "domain": cookie.domain,
                "path": cookie.path,
            }
            for cookie in cookies.jar
        ]
        path = self._path()
        path.write_text(json.dumps(records, indent=2))
        try:
            path.chmod(0o600)
        except OSError:
            pass

    def load(self) -> httpx.Cookies:
        cookies = httpx.Cookies()
        path = self._path()
        if not path.exists():
            return cookies
        try:
            records = json.loads(path.read_text())
        except json.JSONDecodeError:
            self.clear()
            return cookies
        if not isinstance(records, list):
            self.clear()
            return cookies
        for record in records:
            if not isinstance(record, dict) or "name" not in record or "value" not in record:
                continue
            cookies.set(
                str(record["name"]),
                str(record["value"]),
                domain=str(record.get("domain") or ""),
                path=str(record.get("path") or "/"),
            )
        return cookies

    def clear(self) -> None:
        path = self._path()
        if path.exists():
            path.unlink()
