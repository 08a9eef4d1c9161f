"""Per-run state shared by every worker."""
import threading
import time
from dataclasses import dataclass, field

from .counters import RunCounters
from .latency_histogram import LatencyHistogram
from .throughput_histogram import ThroughputHistogram


@dataclass
class RunContext:
    """Owns the counters, histograms and stop signal of one run.

    Workers only write to it while the run is active; the aggregates are read
    once, after every worker has observed ``stop_event`` and returned.
    """
    counters: RunCounters
    latency: LatencyHistogram
    throughput: ThroughputHistogram
    stop_event: threading.Event = field(default_factory=threading.Event)
    started_at: float = field(default_factory=time.perf_counter)

    @classmethod
    def create(cls, duration: float) -> "RunContext":
        return cls(
            counters=RunCounters(),
            latency=LatencyHistogram(),
            throughput=ThroughputHistogram(duration),
        )

    def elapsed(self) -> float:
        """Seconds since the run started."""
        return time.perf_counter() - self.started_at

    @property
    def stopped(self) -> bool:
        return self.stop_event.is_set()

    def stop(self) -> None:
        self.stop_event.set()
