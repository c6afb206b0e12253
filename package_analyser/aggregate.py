"""Aggregator: fold per-file scan results into a PackageSummary."""

from typing import Iterable

from .models import PackageSummary, ScanResult


def fold_results(name: str, results: Iterable[ScanResult]) -> PackageSummary:
    """Fold results in processing order. Pure: no I/O, deterministic."""
    summary = PackageSummary(name=name)
    for result in results:
        summary.add(result)
    return summary
