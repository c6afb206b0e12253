"""Source readers: local directory or GitHub directory, same PackageUnit output."""

from pathlib import Path
from typing import Protocol

from ..config import AnalyserConfig
from ..models import PackageUnit
from ..scanner import GoScanner
from .github import (
    GitHubContentsClient,
    GitHubLocation,
    GitHubSource,
    is_github_locator,
    parse_github_locator,
)
from .local import LocalSource, accept_all


class SourceReader(Protocol):
    def read_units(self) -> list[PackageUnit]:
        ...


def classify_locator(locator: str) -> str:
    """Return "github" for github.com locators, "local" for anything else."""
    return "github" if is_github_locator(locator) else "local"


def open_source(locator: str, config: AnalyserConfig, scanner: GoScanner) -> SourceReader:
    """Pick the reader variant for a locator."""
    if classify_locator(locator) == "github":
        location = parse_github_locator(locator)
        client = GitHubContentsClient(api_url=config.api_url, token=config.token, timeout=config.timeout)
        return GitHubSource(location, client, workers=config.workers)
    return LocalSource(Path(locator), scanner)


__all__ = [
    "SourceReader",
    "classify_locator",
    "open_source",
    "GitHubContentsClient",
    "GitHubLocation",
    "GitHubSource",
    "LocalSource",
    "accept_all",
    "parse_github_locator",
]
