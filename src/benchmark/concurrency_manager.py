"""Manages the worker threads of a run."""
import logging
import concurrent.futures
from typing import Callable, List, Sequence

from .constants import BenchmarkConstants
from .exceptions import BenchmarkExecutionError
from .pipeline_transport import PipelineTransport
from .run_context import RunContext


# Configure logging
logger = logging.getLogger(__name__)

Worker = Callable[[PipelineTransport, RunContext], None]


class ConcurrencyManager:
    """Starts ``pipeline`` workers per transport, stops them and waits for all of them."""

    def __init__(self, pipeline: int):
        self.pipeline = pipeline

    def run_workers(self, worker: Worker, transports: Sequence[PipelineTransport], context: RunContext, duration: float) -> None:
        """
        Run the workers for ``duration`` seconds.

        Returns only once every worker has seen the stop signal and exited.

        Args:
            worker: Loop executed by each worker until ``context`` is stopped.
            transports: One transport per concurrency slot.
            context: Run state; its stop signal ends the workers.
            duration: Seconds to let the workers run.

        Raises:
            BenchmarkExecutionError: If any worker failed unexpectedly.
        """
        workers = len(transports) * self.pipeline
        failures: List[BaseException] = []
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix=BenchmarkConstants.WORKER_THREAD_PREFIX) as executor:
            futures = [executor.submit(worker, transport, context) for transport in transports for _ in range(self.pipeline)]
            logger.info(f"Started {workers} worker(s)")
            try:
                # Returns early when a worker fails or stop() is called
                context.stop_event.wait(duration)
            finally:
                context.stop()
                for future in concurrent.futures.as_completed(futures):
                    error = future.exception()
                    if error is not None:
                        logger.error(f"Worker failed: {error}")
                        failures.append(error)
        logger.info(f"All {workers} worker(s) stopped")

        if failures:
            raise BenchmarkExecutionError(f"{len(failures)} worker(s) failed") from failures[0]
