"""Time-bucketed view of request rate and payload size over a run."""
import bisect
import threading
from typing import List, Sequence

import numpy as np

from .constants import BenchmarkConstants
from .models import ThroughputResults


class ThroughputHistogram:
    """Counts responses per time bucket of the declared run duration.

    Bucket ``i`` covers ``(cut_points[i-1], cut_points[i]]`` seconds from the
    start of the run, bucket 0 covers ``[0, cut_points[0]]``. Each bucket keeps a
    running request count and the size of the last response that landed in it.
    """

    def __init__(self, duration: float, quantiles: Sequence[float] = BenchmarkConstants.THROUGHPUT_QUANTILES):
        self.duration = duration
        self.cut_points: List[float] = [duration * q for q in quantiles]
        self._lock = threading.Lock()
        self._requests: List[int] = [0] * len(self.cut_points)
        self._sizes: List[int] = [0] * len(self.cut_points)
        self._last_bucket = -1

    def bucket_for(self, elapsed: float) -> int:
        """Index of the bucket containing ``elapsed``, or -1 past the last cut point."""
        index = bisect.bisect_left(self.cut_points, elapsed)
        return index if index < len(self.cut_points) else -1

    def add_size(self, elapsed: float, size: int) -> bool:
        """
        Record one response observed ``elapsed`` seconds into the run.

        A bucket reached for the first time starts from the count of the bucket
        before it, so counts never fall back to zero once traffic has started.
        A response timed before the newest populated bucket is counted there.

        Args:
            elapsed: Seconds since the run started.
            size: Bytes read for the response.

        Returns:
            False when ``elapsed`` falls after the last bucket and nothing was recorded.
        """
        index = self.bucket_for(elapsed)
        if index < 0:
            return False

        with self._lock:
            # Clock read before the lock; a late arrival joins the current bucket
            index = max(index, self._last_bucket)
            if index > self._last_bucket >= 0:
                for i in range(self._last_bucket + 1, index + 1):
                    if self._requests[i] == 0:
                        self._requests[i] = self._requests[i - 1]
                self._last_bucket = index
            elif self._last_bucket < 0:
                self._last_bucket = index
            self._requests[index] += 1
            self._sizes[index] = size
        return True

    def snapshot(self) -> ThroughputResults:
        """Copy the buckets and summarize them."""
        with self._lock:
            requests = list(self._requests)
            sizes = list(self._sizes)

        request_values = np.asarray(requests, dtype=np.float64)
        size_values = np.asarray(sizes, dtype=np.float64)
        return ThroughputResults(
            cut_points=list(self.cut_points),
            requests=requests,
            sizes=sizes,
            requests_avg=float(request_values.mean()),
            requests_min=int(request_values.min()),
            requests_stddev=float(request_values.std()),
            sizes_avg=float(size_values.mean()),
            sizes_min=int(size_values.min()),
            sizes_stddev=float(size_values.std()),
        )
