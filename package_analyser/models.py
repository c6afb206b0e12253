"""Structured records for sources, scan results and summaries."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class SourceFile:
    """One Go file as discovered: name plus decoded text."""

    name: str
    text: str


@dataclass(frozen=True)
class PackageUnit:
    """Files analysed together as one package."""

    name: str
    files: tuple[SourceFile, ...] = ()


class DeclKind(str, Enum):
    FUNCTION = "function"
    METHOD = "method"
    TYPE = "type"
    VAR = "var"
    CONST = "const"


@dataclass(frozen=True)
class Declaration:
    """A top-level declaration, tagged by kind."""

    kind: DeclKind
    name: str


@dataclass(frozen=True)
class ScanResult:
    """Per-file output of the declaration scanner."""

    file_name: str
    package_name: str
    exported_functions: int = 0
    imports: frozenset[str] = frozenset()
    declarations: tuple[Declaration, ...] = ()


@dataclass
class PackageSummary:
    """Package-level totals, built by folding ScanResults in order."""

    name: str
    total_exported: int = 0
    file_count: int = 0
    per_file: list[int] = field(default_factory=list)
    imports: set[str] = field(default_factory=set)

    def add(self, result: ScanResult) -> "PackageSummary":
        self.file_count += 1
        self.total_exported += result.exported_functions
        self.per_file.append(result.exported_functions)
        self.imports |= result.imports
        return self

    def sorted_imports(self) -> list[str]:
        return sorted(self.imports)


@dataclass(frozen=True)
class Bucket:
    """Histogram bin covering [lower, upper); the last bin includes upper."""

    lower: float
    upper: float
    count: int = 0


@dataclass(frozen=True)
class Histogram:
    buckets: tuple[Bucket, ...] = ()
    total: int = 0

    @property
    def max_count(self) -> int:
        return max((b.count for b in self.buckets), default=0)
