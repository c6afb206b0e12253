"""GitHub source: one repository directory fetched through the contents API."""

from __future__ import annotations

import base64
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..config import DEFAULT_API_URL
from ..errors import FetchFailed, InvalidLocator
from ..logging_config import get_logger
from ..models import PackageUnit, SourceFile

logger = get_logger(__name__)

GITHUB_HOST = "github.com"
GO_SUFFIX = ".go"


@dataclass(frozen=True)
class GitHubLocation:
    owner: str
    repo: str
    path: str = ""

    @property
    def display_name(self) -> str:
        parts = [self.owner, self.repo] + ([self.path] if self.path else [])
        return "/".join(parts)


@dataclass(frozen=True)
class ContentEntry:
    """One item of a directory listing."""

    name: str
    path: str
    type: str


def strip_scheme(locator: str) -> str:
    for scheme in ("https://", "http://"):
        if locator.startswith(scheme):
            return locator[len(scheme):]
    return locator


def is_github_locator(locator: str) -> bool:
    bare = strip_scheme(locator)
    return bare == GITHUB_HOST or bare.startswith(GITHUB_HOST + "/")


def parse_github_locator(locator: str) -> GitHubLocation:
    """Split github.com/<owner>/<repo>[/<path>...]. Never touches the network."""
    segments = strip_scheme(locator).rstrip("/").split("/")
    if len(segments) < 3:
        raise InvalidLocator(locator, "expected github.com/<owner>/<repo>[/<path>]")
    owner, repo = segments[1], segments[2]
    if not owner or not repo:
        raise InvalidLocator(locator, "owner and repository must not be empty")
    return GitHubLocation(owner=owner, repo=repo, path="/".join(segments[3:]))


class GitHubContentsClient:
    """Minimal client for GET /repos/{owner}/{repo}/contents/{path}."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[Any] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.headers = {"Accept": "application/vnd.github+json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def _get(self, owner: str, repo: str, path: str) -> Any:
        target = f"{owner}/{repo}/{path}".rstrip("/")
        url = f"{self.api_url}/repos/{quote(owner)}/{quote(repo)}/contents/{quote(path)}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, headers=self.headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            raise FetchFailed(target, e) from e

    def list_dir(self, owner: str, repo: str, path: str) -> list[ContentEntry]:
        data = self._get(owner, repo, path)
        if not isinstance(data, list):
            raise FetchFailed(f"{owner}/{repo}/{path}", ValueError("path is not a directory"))
        return [
            ContentEntry(name=item.get("name", ""), path=item.get("path", ""), type=item.get("type", ""))
            for item in data
            if isinstance(item, dict)
        ]

    def fetch_text(self, owner: str, repo: str, path: str) -> str:
        data = self._get(owner, repo, path)
        target = f"{owner}/{repo}/{path}"
        if not isinstance(data, dict) or "content" not in data:
            raise FetchFailed(target, ValueError("response has no file content"))
        encoding = data.get("encoding", "base64")
        if encoding != "base64":
            raise FetchFailed(target, ValueError(f"unsupported content encoding: {encoding}"))
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except ValueError as e:
            raise FetchFailed(target, e) from e


class GitHubSource:
    """Treats one remote directory as a single package unit."""

    def __init__(self, location: GitHubLocation, client: GitHubContentsClient, workers: int = 1) -> None:
        self.location = location
        self.client = client
        self.workers = workers

    def _fetch(self, entry: ContentEntry) -> SourceFile:
        text = self.client.fetch_text(self.location.owner, self.location.repo, entry.path)
        return SourceFile(name=entry.name, text=text)

    def _fetch_all(self, entries: list[ContentEntry]) -> list[SourceFile]:
        if self.workers <= 1 or len(entries) <= 1:
            return [self._fetch(e) for e in entries]
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._fetch, e) for e in entries]
            try:
                # listing order, regardless of completion order
                return [f.result() for f in futures]
            except FetchFailed:
                for f in futures:
                    f.cancel()
                raise

    def read_units(self) -> list[PackageUnit]:
        loc = self.location
        entries = self.client.list_dir(loc.owner, loc.repo, loc.path)
        go_entries = [e for e in entries if e.name.endswith(GO_SUFFIX) and e.type != "dir"]
        logger.debug("%s: %d entries, %d Go file(s)", loc.display_name, len(entries), len(go_entries))
        files = self._fetch_all(go_entries)
        return [PackageUnit(name=loc.display_name, files=tuple(files))]
