"""Collects request latencies and computes their distribution."""
import logging
import threading
from typing import List, Optional

import numpy as np

from .constants import BenchmarkConstants
from .models import LatencyResults


# Configure logging
logger = logging.getLogger(__name__)


class LatencyHistogram:
    """Accumulates round-trip durations from many workers.

    Writers call ``add_time`` concurrently while the run is active; ``finalize``
    is called once, after every writer has stopped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._samples: List[float] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)

    def add_time(self, duration: float) -> None:
        """Record one round-trip duration, in seconds."""
        with self._lock:
            self._samples.append(duration)

    @staticmethod
    def percentile(ordered: np.ndarray, p: float) -> float:
        """
        Pick the sample at rank ``floor(n * p + 0.5) - 1``, clamped to the first sample.

        Args:
            ordered: Samples sorted ascending.
            p: Fraction between 0 and 1.

        Returns:
            The selected sample.
        """
        rank = int(len(ordered) * p + 0.5) - 1
        return float(ordered[max(rank, 0)])

    def finalize(self) -> Optional[LatencyResults]:
        """
        Sort a snapshot of the samples and compute the latency statistics.

        Returns:
            LatencyResults in milliseconds, or None when nothing was recorded.
        """
        with self._lock:
            snapshot = list(self._samples)

        if not snapshot:
            logger.debug("No latency samples recorded")
            return None

        ordered = np.sort(np.asarray(snapshot, dtype=np.float64)) * BenchmarkConstants.MILLISECONDS_PER_SECOND
        p1, p10, p97, p99 = (self.percentile(ordered, p) for p in BenchmarkConstants.LATENCY_PERCENTILES)

        return LatencyResults(
            p1=p1,
            p10=p10,
            # The median is the middle index, not the rank rule
            p50=float(ordered[len(ordered) // 2]),
            p97=p97,
            p99=p99,
            avg=float(ordered.mean()),
            min=float(ordered[0]),
            max=float(ordered[-1]),
            stddev=float(ordered.std()),
            count=len(ordered),
        )
