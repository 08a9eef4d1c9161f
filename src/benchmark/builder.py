"""Stepwise builder for benchmark configurations."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import ValidationError
from urllib3 import encode_multipart_formdata

from src.const import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON
from src.shared.config import Config

from .exceptions import ConfigurationError
from .models import BenchmarkConfig, RequestBody, TargetAddress


# Configure logging
logger = logging.getLogger(__name__)


class BenchmarkBuilder:
    """Collects benchmark settings step by step and builds an immutable BenchmarkConfig.

    Numeric defaults come from ``Config`` so they can be changed through the
    environment or ``config.json``. Only one kind of body (JSON, form fields or
    files) may be set per benchmark.
    """

    def __init__(self, settings: Optional[Config] = None):
        settings = settings or Config()
        self._method = "GET"
        self._url: Optional[str] = None
        self._headers: Dict[str, str] = {}
        self._cookies: Dict[str, str] = {}
        self._content_type: Optional[str] = None
        self._body: Optional[RequestBody] = None
        self._files: List[Tuple[str, Tuple[str, bytes]]] = []
        self._concurrency = settings.concurrency
        self._duration = settings.duration
        self._pipeline = settings.pipeline
        self._timeout = settings.timeout

    def concurrent(self, connections: int) -> "BenchmarkBuilder":
        """Set the number of concurrent connections."""
        self._concurrency = connections
        return self

    def duration(self, seconds: int) -> "BenchmarkBuilder":
        """Set how many seconds the benchmark runs."""
        self._duration = seconds
        return self

    def pipeline(self, depth: int) -> "BenchmarkBuilder":
        """Set the number of requests in flight per connection."""
        self._pipeline = depth
        return self

    def timeout(self, seconds: int) -> "BenchmarkBuilder":
        """Set the per-request timeout."""
        self._timeout = seconds
        return self

    def request(self, method: str, url: str) -> "BenchmarkBuilder":
        self._method = method
        self._url = url
        return self

    def get(self, url: str) -> "BenchmarkBuilder":
        return self.request("GET", url)

    def post(self, url: str) -> "BenchmarkBuilder":
        return self.request("POST", url)

    def put(self, url: str) -> "BenchmarkBuilder":
        return self.request("PUT", url)

    def delete(self, url: str) -> "BenchmarkBuilder":
        return self.request("DELETE", url)

    def patch(self, url: str) -> "BenchmarkBuilder":
        return self.request("PATCH", url)

    def head(self, url: str) -> "BenchmarkBuilder":
        return self.request("HEAD", url)

    def options(self, url: str) -> "BenchmarkBuilder":
        return self.request("OPTIONS", url)

    def with_header(self, headers: Dict[str, str]) -> "BenchmarkBuilder":
        self._headers.update(headers)
        return self

    def with_cookies(self, cookies: Dict[str, str]) -> "BenchmarkBuilder":
        self._cookies.update(cookies)
        return self

    def with_content_type(self, content_type: str) -> "BenchmarkBuilder":
        """Override the Content-Type implied by the body."""
        self._content_type = content_type
        return self

    def _set_body(self, body: RequestBody) -> None:
        if self._body is not None or self._files:
            raise ConfigurationError(f"Cannot send {body.kind} data: a request body is already set")
        self._body = body

    def send_json(self, data: Any) -> "BenchmarkBuilder":
        """Send ``data`` serialized as JSON."""
        try:
            content = json.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"JSON body is not serializable: {e}") from e
        self._set_body(RequestBody(kind="json", content=content, content_type=CONTENT_TYPE_JSON))
        return self

    def send_form_data(self, fields: Dict[str, str]) -> "BenchmarkBuilder":
        """Send ``fields`` URL-encoded."""
        content = urlencode(fields).encode("ascii")
        self._set_body(RequestBody(kind="form", content=content, content_type=CONTENT_TYPE_FORM))
        return self

    def send_file(self, field_name: str, path: str) -> "BenchmarkBuilder":
        """
        Attach the file at ``path`` as a multipart/form-data field.

        The file is read immediately.

        Raises:
            ConfigurationError: If the file cannot be read or another body kind is set.
        """
        if self._body is not None:
            raise ConfigurationError("Cannot send files: a request body is already set")
        file_path = Path(path)
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise ConfigurationError(f"Cannot open file {path!r} for field {field_name!r}: {e}") from e
        self._files.append((field_name, (file_path.name, content)))
        logger.debug(f"Attached {file_path.name} ({len(content)} bytes) as {field_name}")
        return self

    def send_multiple_files(self, field_name: str, paths: Iterable[str]) -> "BenchmarkBuilder":
        """Attach every file in ``paths`` under the same field name."""
        for path in paths:
            self.send_file(field_name, path)
        return self

    def _multipart_body(self) -> RequestBody:
        content, content_type = encode_multipart_formdata(self._files)
        return RequestBody(kind="multipart", content=content, content_type=content_type)

    def build(self) -> BenchmarkConfig:
        """
        Validate the collected settings.

        Returns:
            The immutable benchmark configuration.

        Raises:
            ConfigurationError: If the URL or any setting is invalid.
        """
        if not self._url:
            raise ConfigurationError("No target URL set")
        TargetAddress.from_url(self._url)

        body = self._multipart_body() if self._files else self._body
        try:
            return BenchmarkConfig(
                method=self._method,
                url=self._url,
                headers=dict(self._headers),
                cookies=dict(self._cookies),
                content_type=self._content_type,
                body=body,
                concurrency=self._concurrency,
                duration=self._duration,
                pipeline=self._pipeline,
                timeout=self._timeout,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid benchmark configuration: {e}") from e
