"""Benchmark package initialization."""
from .models import BenchmarkConfig, CounterSnapshot, LatencyResults, RequestBody, RunSummary, TargetAddress, ThroughputResults
from .constants import BenchmarkConstants
from .exceptions import BenchmarkError, BenchmarkExecutionError, ConfigurationError, TransportError, TransportTimeoutError
from .builder import BenchmarkBuilder
from .object_pool import ObjectPool
from .request_session_manager import RequestSessionManager
from .pipeline_transport import PipelineResponse, PipelineTransport
from .counters import RunCounters
from .latency_histogram import LatencyHistogram
from .throughput_histogram import ThroughputHistogram
from .run_context import RunContext
from .concurrency_manager import ConcurrencyManager
from .load_runner import LoadRunner, build_request_template
from .reporter import ConsoleReporter
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .runner import BenchmarkRunner

__all__ = [
    'BenchmarkConfig',
    'CounterSnapshot',
    'LatencyResults',
    'RequestBody',
    'RunSummary',
    'TargetAddress',
    'ThroughputResults',
    'BenchmarkConstants',
    'BenchmarkError',
    'BenchmarkExecutionError',
    'ConfigurationError',
    'TransportError',
    'TransportTimeoutError',
    'BenchmarkBuilder',
    'ObjectPool',
    'RequestSessionManager',
    'PipelineResponse',
    'PipelineTransport',
    'RunCounters',
    'LatencyHistogram',
    'ThroughputHistogram',
    'RunContext',
    'ConcurrencyManager',
    'LoadRunner',
    'build_request_template',
    'ConsoleReporter',
    'ResultExporter',
    'VisualizationGenerator',
    'BenchmarkRunner'
]
