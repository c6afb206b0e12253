"""Shared fixtures: Go file writer and an in-memory GitHub contents API."""

import base64
import time

import pytest
import requests

API = "https://api.github.com"


class FakeResponse:
    def __init__(self, payload, status: int = 200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        return self.payload


class FakeGitHub:
    """Stands in for requests.Session; unknown urls answer 404."""

    def __init__(self):
        self.routes: dict = {}
        self.delays: dict = {}
        self.calls: list[str] = []
        self.headers_seen: list[dict] = []

    def url(self, owner: str, repo: str, path: str) -> str:
        return f"{API}/repos/{owner}/{repo}/contents/{path}"

    def add_dir(self, owner: str, repo: str, path: str, entries: list[tuple[str, str]]) -> None:
        items = [
            {"name": name, "path": f"{path}/{name}" if path else name, "type": kind}
            for name, kind in entries
        ]
        self.routes[self.url(owner, repo, path)] = FakeResponse(items)

    def add_file(self, owner: str, repo: str, path: str, text: str, delay: float = 0.0) -> None:
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        url = self.url(owner, repo, path)
        self.routes[url] = FakeResponse({"type": "file", "encoding": "base64", "content": encoded})
        if delay:
            self.delays[url] = delay

    def add_raw(self, owner: str, repo: str, path: str, route) -> None:
        self.routes[self.url(owner, repo, path)] = route

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        self.headers_seen.append(dict(headers or {}))
        if url in self.delays:
            time.sleep(self.delays[url])
        route = self.routes.get(url)
        if route is None:
            return FakeResponse({"message": "Not Found"}, 404)
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def response():
    """Factory for canned responses: response(payload, status=200)."""
    return FakeResponse


@pytest.fixture
def go_file():
    """Factory: write text to directory/name and return the path."""

    def _write(directory, name, text):
        p = directory / name
        p.write_text(text)
        return p

    return _write
