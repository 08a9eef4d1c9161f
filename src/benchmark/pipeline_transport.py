"""Per-connection client permitting several requests in flight."""
import logging
import threading
from typing import Optional

import requests
from urllib3.exceptions import ReadTimeoutError

from .exceptions import TransportError, TransportTimeoutError
from .models import TargetAddress
from .object_pool import ObjectPool
from .request_session_manager import RequestSessionManager


# Configure logging
logger = logging.getLogger(__name__)


class PipelineResponse:
    """Reusable record of one response: status and bytes read."""

    __slots__ = ("status_code", "body_size", "header_size")

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.status_code = 0
        self.body_size = 0
        self.header_size = 0

    @property
    def size(self) -> int:
        """Body bytes plus serialized header name and value bytes."""
        return self.body_size + self.header_size

    def fill(self, response: requests.Response) -> None:
        self.status_code = response.status_code
        self.body_size = len(response.content)
        self.header_size = sum(len(key) + len(value) for key, value in response.headers.items())


class PipelineTransport:
    """Client bound to one target that holds up to ``pipeline`` requests in flight.

    ``requests`` hands out copies of the prepared request template and
    ``responses`` hands out response records; both return their objects on
    every exit path of the ``with`` block that acquired them.
    """

    def __init__(self, address: TargetAddress, pipeline: int, template: requests.PreparedRequest,
                 session: Optional[requests.Session] = None):
        self.address = address
        self.pipeline = pipeline
        self.session = session or RequestSessionManager.create_pipeline_session(pipeline)
        self._in_flight = threading.BoundedSemaphore(pipeline)
        self.requests: ObjectPool[requests.PreparedRequest] = ObjectPool(template.copy, max_idle=pipeline)
        self.responses: ObjectPool[PipelineResponse] = ObjectPool(PipelineResponse, PipelineResponse.reset, max_idle=pipeline)

    def send(self, request: requests.PreparedRequest, response: PipelineResponse, timeout: float) -> PipelineResponse:
        """
        Send ``request`` and wait for its response or the timeout.

        Args:
            request: Prepared request to send.
            response: Record to fill with the outcome.
            timeout: Connect and read deadline in seconds.

        Returns:
            The filled response record.

        Raises:
            TransportTimeoutError: If the deadline was exceeded.
            TransportError: If the request failed for any other transport reason.
        """
        with self._in_flight:
            try:
                result = self.session.send(request, timeout=timeout, allow_redirects=False)
            except requests.Timeout as e:
                raise TransportTimeoutError(f"Request to {self.address.netloc} timed out") from e
            except requests.ConnectionError as e:
                # A read deadline can surface as a ConnectionError, bare or wrapped in MaxRetryError
                cause = e.args[0] if e.args else None
                if isinstance(cause, ReadTimeoutError) or isinstance(getattr(cause, "reason", None), ReadTimeoutError):
                    raise TransportTimeoutError(f"Reading response from {self.address.netloc} timed out") from e
                raise TransportError(f"Request to {self.address.netloc} failed: {e}") from e
            except requests.RequestException as e:
                raise TransportError(f"Request to {self.address.netloc} failed: {e}") from e

            try:
                response.fill(result)
            finally:
                result.close()
        return response

    def close(self) -> None:
        self.session.close()
