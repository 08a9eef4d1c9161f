"""Console rendering of a finished run."""
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .constants import BenchmarkConstants
from .formatting import format_bytes, format_count, format_duration
from .models import BenchmarkConfig, LatencyResults, RunSummary, ThroughputResults

VALUE_STYLE = "bold green"


class ConsoleReporter:
    """Prints the latency and throughput tables and the run totals."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @staticmethod
    def _table(columns: List[str]) -> Table:
        table = Table(box=None, header_style="bold", pad_edge=False)
        table.add_column("STAT", style=VALUE_STYLE)
        for column in columns:
            table.add_column(column, style=VALUE_STYLE, justify="right")
        return table

    @staticmethod
    def latency_table(latency: LatencyResults) -> Table:
        table = ConsoleReporter._table(list(BenchmarkConstants.BUCKET_LABELS) + ["AVG", "MIN", "MAX", "StdDev"])
        values = [latency.p1, latency.p10, latency.p50, latency.p97, latency.p99,
                  latency.avg, latency.min, latency.max, latency.stddev]
        table.add_row("Latency", *(format_duration(value) for value in values))
        return table

    @staticmethod
    def throughput_table(throughput: ThroughputResults) -> Table:
        table = ConsoleReporter._table(list(BenchmarkConstants.BUCKET_LABELS) + ["AVG", "MIN", "StdDev"])
        table.add_row(
            "Req/Sec",
            *(format_count(value) for value in throughput.requests),
            format_count(throughput.requests_avg),
            format_count(throughput.requests_min),
            format_count(throughput.requests_stddev),
        )
        table.add_row(
            "Bytes/Sec",
            *(format_bytes(value) for value in throughput.sizes),
            format_bytes(throughput.sizes_avg),
            format_bytes(throughput.sizes_min),
            format_bytes(throughput.sizes_stddev),
        )
        return table

    def banner(self, config: BenchmarkConfig) -> None:
        """Print what is about to run."""
        self.console.print(f"Running {config.duration}s test @ {config.url}")
        if config.pipeline == 1:
            self.console.print(f"{config.concurrency} connections\n")
        else:
            self.console.print(f"{config.concurrency} connections with {config.pipeline} pipelining factor\n")

    def report(self, summary: RunSummary) -> None:
        """Print the full report of ``summary``."""
        counters = summary.counters
        # No latency table without samples
        if summary.latency is not None:
            self.console.print(self.latency_table(summary.latency))
            self.console.print()
        self.console.print(self.throughput_table(summary.throughput))
        self.console.print()
        self.console.print("Req/Bytes counts sampled per time bucket of the run.")
        self.console.print(
            f"{format_count(counters.total_requests)} requests in {summary.elapsed:.2f}s, "
            f"{format_bytes(counters.bytes_read)} read"
        )
        self.console.print(
            f"{format_count(counters.ok_responses)} 2xx responses and "
            f"{format_count(counters.error_responses)} non 2xx responses"
        )
        self.console.print(f"{format_count(counters.error_responses)} errors ({format_count(counters.timeouts)} timeouts)")
