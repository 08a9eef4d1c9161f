"""Constants for the benchmarking system."""
from typing import Tuple


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    USER_AGENT = "PipeBench/Benchmark"
    # Fractions of the declared duration closing each throughput bucket
    THROUGHPUT_QUANTILES: Tuple[float, ...] = (0.01, 0.10, 0.50, 0.97, 0.99)
    # Percentile cut-points computed with the rank rule; p50 uses the middle index
    LATENCY_PERCENTILES: Tuple[float, ...] = (0.01, 0.10, 0.97, 0.99)
    BUCKET_LABELS: Tuple[str, ...] = ("1%", "10%", "50%", "97%", "99%")
    WORKER_THREAD_PREFIX = "pipebench-worker"
    MILLISECONDS_PER_SECOND = 1000
    KILO = 1000
    MEGA = 1000000
    LATENCY_CSV = "latency.csv"
    THROUGHPUT_CSV = "throughput.csv"
    SUMMARY_JSON = "summary.json"
    THROUGHPUT_GRAPH = "throughput.png"
