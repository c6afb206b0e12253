"""Pipeline: source reader -> scanner -> aggregator -> histogram -> report."""

from typing import TextIO

from .aggregate import fold_results
from .config import AnalyserConfig
from .format import format_report, write_report
from .histogram import build_histogram, render_histogram
from .logging_config import get_logger
from .models import PackageSummary
from .scanner import GoScanner
from .sources import SourceReader, open_source

logger = get_logger(__name__)


def analyse(reader: SourceReader, scanner: GoScanner) -> list[PackageSummary]:
    """Scan every unit fully; any failure aborts before anything is reported."""
    summaries = []
    for unit in reader.read_units():
        summary = fold_results(unit.name, (scanner.scan(f) for f in unit.files))
        logger.debug(
            "package %s: %d exported across %d file(s)",
            summary.name, summary.total_exported, summary.file_count,
        )
        summaries.append(summary)
    return summaries


def render(summary: PackageSummary, config: AnalyserConfig) -> str:
    hist = build_histogram(summary.per_file, config.bins)
    return format_report(summary, render_histogram(hist, config.bar_width))


def run(locator: str, config: AnalyserConfig, stream: TextIO) -> list[PackageSummary]:
    """Analyse a locator and write one report per package to stream."""
    scanner = GoScanner()
    reader = open_source(locator, config, scanner)
    summaries = analyse(reader, scanner)
    text = "".join(render(s, config) for s in summaries)
    write_report(stream, text)
    return summaries
