"""Shared test configuration and fixtures for all tests."""

import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

import pytest
import requests

from src.benchmark.exceptions import TransportError, TransportTimeoutError
from src.benchmark.models import BenchmarkConfig
from src.benchmark.object_pool import ObjectPool
from src.benchmark.pipeline_transport import PipelineResponse
from .test_const import RESPONSE_BODY, RESPONSE_STATUS, SLOW_RESPONSE_DELAY, TEST_URL


class FakeTransport:
    """In-memory stand-in for PipelineTransport with a scripted outcome."""

    def __init__(self, address, pipeline, template, status_code=RESPONSE_STATUS, body_size=len(RESPONSE_BODY),
                 error=None, delay=0.001):
        self.address = address
        self.pipeline = pipeline
        self.template = template
        self.status_code = status_code
        self.body_size = body_size
        self.error = error
        self.delay = delay
        self.closed = False
        self.sent = 0
        self._lock = threading.Lock()
        self.requests = ObjectPool(template.copy, max_idle=pipeline)
        self.responses = ObjectPool(PipelineResponse, PipelineResponse.reset, max_idle=pipeline)

    def send(self, request, response, timeout):
        with self._lock:
            self.sent += 1
        time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        response.status_code = self.status_code
        response.body_size = self.body_size
        return response

    def close(self):
        self.closed = True


class FakeTransportFactory:
    """Builds FakeTransports and remembers them."""

    def __init__(self, **options):
        self.options = options
        self.transports = []

    def __call__(self, address, pipeline, template):
        transport = FakeTransport(address, pipeline, template, **self.options)
        self.transports.append(transport)
        return transport


@pytest.fixture
def fake_transport_factory():
    """Factory for transports that always answer 200 with a 5-byte body."""
    return FakeTransportFactory()


@pytest.fixture
def timeout_transport_factory():
    """Factory for transports whose requests always time out."""
    return FakeTransportFactory(error=TransportTimeoutError("deadline exceeded"))


@pytest.fixture
def failing_transport_factory():
    """Factory for transports whose requests always fail to connect."""
    return FakeTransportFactory(error=TransportError("connection refused"))


@pytest.fixture
def benchmark_config():
    """Shortest possible single-connection benchmark."""
    return BenchmarkConfig(url=TEST_URL, concurrency=1, duration=1, pipeline=1, timeout=1)


@pytest.fixture
def mock_session():
    """Mock requests session returning a 200 response."""
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = RESPONSE_STATUS
    response.content = RESPONSE_BODY
    response.headers = {"Content-Length": "5"}
    session.send.return_value = response
    return session


class _HelloHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def _reply(self):
        length = int(self.headers.get("Content-Length") or 0)
        if length:
            self.rfile.read(length)
        self.send_response(RESPONSE_STATUS)
        self.send_header("Content-Length", str(len(RESPONSE_BODY)))
        self.end_headers()
        self.wfile.write(RESPONSE_BODY)

    do_GET = _reply
    do_POST = _reply

    def log_message(self, format, *args):
        pass


class _SlowHandler(_HelloHandler):
    """Answers only after the client deadline has passed."""

    def _reply(self):
        time.sleep(SLOW_RESPONSE_DELAY)
        try:
            super()._reply()
        except OSError:
            # Client already gave up
            self.close_connection = True

    do_GET = _reply
    do_POST = _reply


def _serve(handler):
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}/ping"
    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture
def local_http_server():
    """HTTP server on a free local port that answers every request with 200 ``hello``."""
    yield from _serve(_HelloHandler)


@pytest.fixture
def slow_http_server():
    """HTTP server that answers only after ``SLOW_RESPONSE_DELAY`` seconds."""
    yield from _serve(_SlowHandler)
