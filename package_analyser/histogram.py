"""Linear histogram over per-file counts, rendered as text bars."""

from typing import Sequence

from .models import Bucket, Histogram

# Eighth-width blocks, index n = n/8 of a cell.
_PARTIAL = " ▏▎▍▌▋▊▉"
_FULL = "█"


def build_histogram(values: Sequence[float], bins: int) -> Histogram:
    """Bucket values into equal-width bins spanning [min, max].

    Every bin is upper-exclusive except the last. When all values are
    equal the result is a single zero-width bin holding every point.
    """
    if bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins}")
    if not values:
        return Histogram()

    lo, hi = min(values), max(values)
    if lo == hi:
        return Histogram(buckets=(Bucket(lo, hi, len(values)),), total=len(values))

    step = (hi - lo) / bins
    counts = [0] * bins
    for v in values:
        idx = min(int((v - lo) / step), bins - 1)
        counts[idx] += 1
    buckets = tuple(
        Bucket(lo + i * step, hi if i == bins - 1 else lo + (i + 1) * step, c)
        for i, c in enumerate(counts)
    )
    return Histogram(buckets=buckets, total=len(values))


def bar(count: int, max_count: int, width: int) -> str:
    """Bar of `width` cells at max_count, scaled linearly below it."""
    if count <= 0 or max_count <= 0:
        return ""
    length = count / max_count * width
    full = int(length)
    eighths = int(round((length - full) * 8))
    if eighths == 8:
        full, eighths = full + 1, 0
    return _FULL * full + (_PARTIAL[eighths] if eighths else "")


def _fmt(x: float) -> str:
    return f"{x:.4g}"


def render_histogram(hist: Histogram, width: int = 20) -> list[str]:
    """One line per bucket: range, share of points, bar, count."""
    if not hist.buckets:
        return []
    ranges = [f"{_fmt(b.lower)}-{_fmt(b.upper)}" for b in hist.buckets]
    shares = [f"{b.count * 100.0 / hist.total:.3g}%" for b in hist.buckets]
    range_w = max(len(r) for r in ranges)
    share_w = max(len(s) for s in shares)
    lines = []
    for b, r, s in zip(hist.buckets, ranges, shares):
        lines.append(f"{r.ljust(range_w)}  {s.rjust(share_w)}  {bar(b.count, hist.max_count, width)} {b.count}")
    return lines
