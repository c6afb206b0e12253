"""Report text: histogram, summary line, sorted imports."""

from typing import List, TextIO

from .errors import ReportWriteFailed
from .models import PackageSummary


def summary_line(summary: PackageSummary) -> str:
    return (
        f"Package '{summary.name}' has {summary.total_exported} exported function(s) "
        f"across {summary.file_count} file(s)"
    )


def imports_line(summary: PackageSummary) -> str:
    return f"Importing the following: [{' '.join(summary.sorted_imports())}]"


def format_report(summary: PackageSummary, hist_lines: List[str]) -> str:
    """Build one package's report as a single string."""
    lines = list(hist_lines)
    lines.append(summary_line(summary))
    lines.append(imports_line(summary))
    return "\n".join(lines) + "\n"


def write_report(stream: TextIO, text: str) -> None:
    """Append text to the output stream; failures become ReportWriteFailed."""
    try:
        stream.write(text)
        stream.flush()
    except (OSError, ValueError) as e:
        raise ReportWriteFailed(e) from e
