"""Data models for the benchmarking system."""
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.const import (
    DEFAULT_CONCURRENCY,
    DEFAULT_DURATION,
    DEFAULT_PIPELINE,
    DEFAULT_PORTS,
    DEFAULT_TIMEOUT,
    HTTP_METHODS,
    SCHEME_HTTPS,
)
from .exceptions import ConfigurationError


class RequestBody(BaseModel):
    """Encoded request body attached to every benchmark request."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["json", "form", "multipart"]
    content: bytes
    content_type: str


class BenchmarkConfig(BaseModel):
    """Immutable configuration for one benchmark run."""
    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    cookies: Dict[str, str] = Field(default_factory=dict)
    content_type: Optional[str] = None
    body: Optional[RequestBody] = None
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)
    duration: int = Field(default=DEFAULT_DURATION, ge=1)
    pipeline: int = Field(default=DEFAULT_PIPELINE, ge=1)
    timeout: int = Field(default=DEFAULT_TIMEOUT, ge=1)

    @field_validator("method")
    @classmethod
    def _check_method(cls, value: str) -> str:
        method = value.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported method {value!r}")
        return method

    @property
    def effective_content_type(self) -> Optional[str]:
        """The explicit override if any, else the type implied by the body."""
        if self.content_type:
            return self.content_type
        if self.body is not None:
            return self.body.content_type
        return None

    @property
    def workers(self) -> int:
        return self.concurrency * self.pipeline


@dataclass(frozen=True)
class TargetAddress:
    """Host, port and scheme a transport connects to."""
    scheme: str
    host: str
    port: int

    @property
    def is_tls(self) -> bool:
        return self.scheme == SCHEME_HTTPS

    @property
    def netloc(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_url(cls, url: str) -> "TargetAddress":
        """Parse the transport address out of a target URL.

        Raises:
            ConfigurationError: If the URL has no http(s) scheme or no host.
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        if scheme not in DEFAULT_PORTS:
            raise ConfigurationError(f"Unsupported URL scheme in {url!r}")
        if not parts.hostname:
            raise ConfigurationError(f"Missing host in {url!r}")
        try:
            port = parts.port or DEFAULT_PORTS[scheme]
        except ValueError as e:
            raise ConfigurationError(f"Invalid port in {url!r}") from e
        return cls(scheme=scheme, host=parts.hostname, port=port)


@dataclass
class LatencyResults:
    """Container for latency statistics, all in milliseconds."""
    p1: float
    p10: float
    p50: float
    p97: float
    p99: float
    avg: float
    min: float
    max: float
    stddev: float
    count: int


@dataclass
class ThroughputResults:
    """Request counts and last observed sizes per time bucket."""
    cut_points: List[float]
    requests: List[int]
    sizes: List[int]
    requests_avg: float = 0.0
    requests_min: int = 0
    requests_stddev: float = 0.0
    sizes_avg: float = 0.0
    sizes_min: int = 0
    sizes_stddev: float = 0.0


@dataclass(frozen=True)
class CounterSnapshot:
    """Frozen view of the run counters."""
    total_requests: int = 0
    ok_responses: int = 0
    error_responses: int = 0
    timeouts: int = 0
    bytes_read: int = 0


@dataclass
class RunSummary:
    """Everything a finished run hands to the reporter and exporters."""
    url: str
    method: str
    concurrency: int
    pipeline: int
    duration: int
    elapsed: float
    counters: CounterSnapshot
    throughput: ThroughputResults
    latency: Optional[LatencyResults] = None
