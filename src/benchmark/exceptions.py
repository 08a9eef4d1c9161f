"""Custom exceptions for the benchmarking system."""


class BenchmarkError(Exception):
    """Base class for every benchmark failure."""
    pass


class ConfigurationError(BenchmarkError):
    """Exception raised when a benchmark cannot be configured.

    Raised before any worker starts; a run never begins with a bad config.
    """
    pass


class BenchmarkExecutionError(BenchmarkError):
    """Custom exception for benchmark execution failures."""
    pass


class TransportError(BenchmarkError):
    """Exception raised when a request fails at the transport level."""
    pass


class TransportTimeoutError(TransportError):
    """Exception raised when a request exceeds its deadline."""
    pass
