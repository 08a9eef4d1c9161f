"""Open-loop load generator driving a target with pipelined connections."""
import logging
import time
from typing import Callable, List, Optional

import requests

from src.const import CONTENT_TYPE_HEADER, USER_AGENT_HEADER

from .concurrency_manager import ConcurrencyManager
from .constants import BenchmarkConstants
from .exceptions import TransportError, TransportTimeoutError
from .models import BenchmarkConfig, RunSummary, TargetAddress
from .pipeline_transport import PipelineTransport
from .run_context import RunContext


# Configure logging
logger = logging.getLogger(__name__)

TransportFactory = Callable[[TargetAddress, int, requests.PreparedRequest], PipelineTransport]


def build_request_template(config: BenchmarkConfig) -> requests.PreparedRequest:
    """Prepare the request every worker sends."""
    headers = dict(config.headers)
    content_type = config.effective_content_type
    if content_type:
        headers[CONTENT_TYPE_HEADER] = content_type
    headers[USER_AGENT_HEADER] = BenchmarkConstants.USER_AGENT

    request = requests.Request(
        method=config.method,
        url=config.url,
        headers=headers,
        cookies=dict(config.cookies),
        data=config.body.content if config.body is not None else None,
    )
    return request.prepare()


class LoadRunner:
    """Runs one benchmark: ``concurrency`` transports, ``pipeline`` workers on each.

    Workers send back to back with no pacing until the run is stopped. Every
    attempt is counted once and contributes one latency sample.
    """

    def __init__(self, config: BenchmarkConfig, transport_factory: Optional[TransportFactory] = None):
        self.config = config
        self.address = TargetAddress.from_url(config.url)
        self.transport_factory = transport_factory or PipelineTransport
        self.concurrency_manager = ConcurrencyManager(config.pipeline)
        self._context: Optional[RunContext] = None

    def stop(self) -> None:
        """Ask a running benchmark to finish early."""
        if self._context is not None:
            self._context.stop()

    def _worker(self, transport: PipelineTransport, context: RunContext) -> None:
        timeout = self.config.timeout
        try:
            while not context.stopped:
                with transport.requests.acquire() as request, transport.responses.acquire() as response:
                    started = time.perf_counter()
                    try:
                        transport.send(request, response, timeout)
                    except TransportTimeoutError as e:
                        context.latency.add_time(time.perf_counter() - started)
                        context.counters.record_failure(timed_out=True)
                        logger.debug(str(e))
                        continue
                    except TransportError as e:
                        context.latency.add_time(time.perf_counter() - started)
                        context.counters.record_failure()
                        logger.debug(str(e))
                        continue

                    context.latency.add_time(time.perf_counter() - started)
                    size = response.size
                    context.throughput.add_size(context.elapsed(), size)
                    context.counters.record_response(response.status_code, size)
        except Exception:
            # Wake the control thread so the run ends now
            context.stop()
            raise

    def run(self) -> RunSummary:
        """
        Drive the target for the configured duration.

        Returns:
            The frozen run summary.

        Raises:
            BenchmarkExecutionError: If a worker failed unexpectedly.
        """
        config = self.config
        template = build_request_template(config)
        transports: List[PipelineTransport] = [
            self.transport_factory(self.address, config.pipeline, template) for _ in range(config.concurrency)
        ]

        logger.info(f"Running {config.duration}s test @ {config.url} with {config.concurrency} connection(s), pipelining {config.pipeline}")
        context = RunContext.create(config.duration)
        self._context = context
        try:
            self.concurrency_manager.run_workers(self._worker, transports, context, config.duration)
        finally:
            self._context = None
            for transport in transports:
                transport.close()

        elapsed = context.elapsed()
        counters = context.counters.snapshot()
        logger.info(f"Finished: {counters.total_requests} request(s) in {elapsed:.2f}s")

        return RunSummary(
            url=config.url,
            method=config.method,
            concurrency=config.concurrency,
            pipeline=config.pipeline,
            duration=config.duration,
            elapsed=elapsed,
            counters=counters,
            throughput=context.throughput.snapshot(),
            latency=context.latency.finalize(),
        )
