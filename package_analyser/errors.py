"""Error taxonomy. Every failure aborts the run and reaches the CLI."""

from typing import Dict, Optional


class PackageAnalyserError(Exception):
    """Base exception for all package-analyser errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidLocator(PackageAnalyserError):
    """Remote locator does not have the <host>/<owner>/<repo>[/path] shape."""

    def __init__(self, locator: str, reason: str):
        super().__init__(f"Invalid locator: {locator}", details={"reason": reason})
        self.locator = locator
        self.reason = reason


class DirectoryNotFound(PackageAnalyserError):
    def __init__(self, path: str):
        super().__init__(f"Directory not found: {path}")
        self.path = path


class ReadFailed(PackageAnalyserError):
    """A local source file could not be read or decoded."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Cannot read file: {path}", details={"cause": str(cause)})
        self.path = path
        self.cause = cause


class FetchFailed(PackageAnalyserError):
    """A GitHub listing or content request failed."""

    def __init__(self, target: str, cause: Exception):
        super().__init__(f"Fetching {target} failed", details={"cause": str(cause)})
        self.target = target
        self.cause = cause


class ParseFailed(PackageAnalyserError):
    def __init__(self, file_name: str, cause: str):
        super().__init__(f"Failed to parse Go file: {file_name}", details={"cause": cause})
        self.file_name = file_name
        self.cause = cause


class ReportWriteFailed(PackageAnalyserError):
    def __init__(self, cause: Exception):
        super().__init__("Writing report failed", details={"cause": str(cause)})
        self.cause = cause


class ConfigError(PackageAnalyserError):
    """Config file is unreadable or holds bad values."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Invalid config: {source}", details={"reason": reason})
        self.source = source
        self.reason = reason
