"""Thread-safe counters shared by every worker of a run."""
import threading

from src.const import HTTP_REDIRECT, HTTP_SUCCESS

from .models import CounterSnapshot


class RunCounters:
    """Request, response, error and byte counters for one run.

    Each attempt is classified under a single lock acquisition, so
    ``ok_responses + error_responses == total_requests`` holds for every snapshot.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total_requests = 0
        self._ok_responses = 0
        self._error_responses = 0
        self._timeouts = 0
        self._bytes_read = 0

    def record_response(self, status_code: int, size: int) -> None:
        """Record a completed round trip."""
        with self._lock:
            self._total_requests += 1
            self._bytes_read += size
            if HTTP_SUCCESS <= status_code < HTTP_REDIRECT:
                self._ok_responses += 1
            else:
                self._error_responses += 1

    def record_failure(self, timed_out: bool = False) -> None:
        """Record an attempt that failed at the transport level."""
        with self._lock:
            self._total_requests += 1
            self._error_responses += 1
            if timed_out:
                self._timeouts += 1

    def snapshot(self) -> CounterSnapshot:
        with self._lock:
            return CounterSnapshot(
                total_requests=self._total_requests,
                ok_responses=self._ok_responses,
                error_responses=self._error_responses,
                timeouts=self._timeouts,
                bytes_read=self._bytes_read,
            )
