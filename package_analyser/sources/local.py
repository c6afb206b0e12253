"""Local directory source: reads *.go files directly inside one directory."""

from pathlib import Path
from typing import Callable

from ..errors import DirectoryNotFound, ReadFailed
from ..logging_config import get_logger
from ..models import PackageUnit, SourceFile
from ..scanner import GoScanner

logger = get_logger(__name__)

GO_SUFFIX = ".go"


def accept_all(path: Path) -> bool:
    """Default file filter; every .go file is analysed."""
    return True


class LocalSource:
    """Directory on disk, grouped into one unit per declared package name."""

    def __init__(
        self,
        path: Path,
        scanner: GoScanner,
        file_filter: Callable[[Path], bool] = accept_all,
    ) -> None:
        self.path = Path(path)
        self.scanner = scanner
        self.file_filter = file_filter

    def _discover(self) -> list[Path]:
        if not self.path.is_dir():
            raise DirectoryNotFound(str(self.path))
        try:
            entries = sorted(self.path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ReadFailed(str(self.path), e) from e
        return [
            p for p in entries
            if p.name.endswith(GO_SUFFIX) and p.is_file() and self.file_filter(p)
        ]

    def _read(self, path: Path) -> SourceFile:
        try:
            return SourceFile(name=path.name, text=path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailed(str(path), e) from e

    def read_units(self) -> list[PackageUnit]:
        files = [self._read(p) for p in self._discover()]
        logger.debug("found %d Go file(s) in %s", len(files), self.path)
        if not files:
            return [PackageUnit(name=self.path.resolve().name)]

        groups: dict[str, list[SourceFile]] = {}
        for f in files:
            groups.setdefault(self.scanner.package_name(f), []).append(f)
        return [PackageUnit(name=name, files=tuple(groups[name])) for name in sorted(groups)]
