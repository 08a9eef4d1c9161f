"""Human-readable rendering of durations, sizes and counts."""
from .constants import BenchmarkConstants


def format_duration(milliseconds: float) -> str:
    """Render as ``Nms`` below one second, else ``N.NNs``."""
    millis = int(milliseconds)
    if millis < BenchmarkConstants.MILLISECONDS_PER_SECOND:
        return f"{millis}ms"
    return f"{millis / BenchmarkConstants.MILLISECONDS_PER_SECOND:.2f}s"


def format_bytes(size: float) -> str:
    """Render as bytes below 1000, ``N.N KB`` below 1,000,000, else ``N.N MB``."""
    size = int(size)
    if size >= BenchmarkConstants.MEGA:
        return f"{size / BenchmarkConstants.MEGA:.1f} MB"
    if size >= BenchmarkConstants.KILO:
        return f"{size / BenchmarkConstants.KILO:.1f} KB"
    return f"{size} B"


def format_count(count: float) -> str:
    """Render as ``N`` below 1000, else thousands as ``Nk``."""
    count = int(count)
    if count < BenchmarkConstants.KILO:
        return f"{count}"
    return f"{count // BenchmarkConstants.KILO}k"
