"""Unit tests for the benchmark builder and configuration models."""

import json
from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from src.benchmark.builder import BenchmarkBuilder
from src.benchmark.exceptions import ConfigurationError
from src.benchmark.models import BenchmarkConfig, TargetAddress
from src.shared.config import Config
from ..test_const import TEST_COOKIES, TEST_FORM, TEST_HEADERS, TEST_JSON, TEST_TLS_URL, TEST_URL


class TestBenchmarkBuilder:
    """Test stepwise configuration building."""

    def test_defaults(self):
        """Defaults are 10 connections, 10 seconds, pipeline 1, timeout 10."""
        config = BenchmarkBuilder(Config()).get(TEST_URL).build()

        assert config.method == "GET"
        assert config.url == TEST_URL
        assert config.concurrency == 10
        assert config.duration == 10
        assert config.pipeline == 1
        assert config.timeout == 10
        assert config.body is None
        assert config.effective_content_type is None

    def test_fluent_settings(self):
        config = (
            BenchmarkBuilder(Config())
            .post(TEST_URL)
            .concurrent(4)
            .duration(3)
            .pipeline(2)
            .timeout(5)
            .with_header(TEST_HEADERS)
            .with_cookies(TEST_COOKIES)
            .build()
        )

        assert config.method == "POST"
        assert config.concurrency == 4
        assert config.duration == 3
        assert config.pipeline == 2
        assert config.timeout == 5
        assert config.workers == 8
        assert config.headers == TEST_HEADERS
        assert config.cookies == TEST_COOKIES

    @pytest.mark.parametrize("method", ["get", "post", "put", "delete", "patch", "head", "options"])
    def test_method_shortcuts(self, method):
        config = getattr(BenchmarkBuilder(Config()), method)(TEST_URL).build()
        assert config.method == method.upper()

    def test_config_is_immutable(self):
        config = BenchmarkBuilder(Config()).get(TEST_URL).build()
        with pytest.raises(ValidationError):
            config.concurrency = 99

    def test_send_json(self):
        config = BenchmarkBuilder(Config()).post(TEST_URL).send_json(TEST_JSON).build()

        assert config.body.kind == "json"
        assert json.loads(config.body.content) == TEST_JSON
        assert config.effective_content_type == "application/json"

    def test_send_form_data(self):
        config = BenchmarkBuilder(Config()).post(TEST_URL).send_form_data(TEST_FORM).build()

        assert config.body.kind == "form"
        assert parse_qs(config.body.content.decode()) == {k: [v] for k, v in TEST_FORM.items()}
        assert config.effective_content_type == "application/x-www-form-urlencoded"

    def test_send_files(self, tmp_path):
        """Files are read at configuration time and encoded as multipart."""
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_bytes(b"first file")
        second.write_bytes(b"second file")

        config = (
            BenchmarkBuilder(Config())
            .post(TEST_URL)
            .send_multiple_files("upload[]", [str(first), str(second)])
            .build()
        )

        assert config.body.kind == "multipart"
        assert config.effective_content_type.startswith("multipart/form-data; boundary=")
        assert b"first file" in config.body.content
        assert b"second file" in config.body.content
        assert b'filename="a.txt"' in config.body.content

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).post(TEST_URL).send_file("upload", str(tmp_path / "missing.bin"))

    def test_body_kinds_are_exclusive(self, tmp_path):
        attachment = tmp_path / "a.txt"
        attachment.write_bytes(b"x")

        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).post(TEST_URL).send_json(TEST_JSON).send_form_data(TEST_FORM)
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).post(TEST_URL).send_file("f", str(attachment)).send_json(TEST_JSON)
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).post(TEST_URL).send_form_data(TEST_FORM).send_file("f", str(attachment))

    def test_content_type_override_wins(self):
        config = (
            BenchmarkBuilder(Config())
            .post(TEST_URL)
            .send_json(TEST_JSON)
            .with_content_type("application/vnd.api+json")
            .build()
        )
        assert config.effective_content_type == "application/vnd.api+json"

    @pytest.mark.parametrize("field,value", [
        ("concurrent", 0),
        ("duration", 0),
        ("pipeline", 0),
        ("timeout", -1),
    ])
    def test_numeric_bounds(self, field, value):
        builder = getattr(BenchmarkBuilder(Config()).get(TEST_URL), field)(value)
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_missing_url(self):
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).build()

    @pytest.mark.parametrize("url", ["ftp://example.test/", "localhost:8080", "http:///path", "http://host:99999/"])
    def test_invalid_url(self, url):
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).get(url).build()

    def test_unknown_method(self):
        with pytest.raises(ConfigurationError):
            BenchmarkBuilder(Config()).request("BREW", TEST_URL).build()


class TestTargetAddress:
    """Test transport address resolution."""

    def test_plain_http(self):
        address = TargetAddress.from_url(TEST_URL)
        assert address.host == "127.0.0.1"
        assert address.port == 8080
        assert address.netloc == "127.0.0.1:8080"
        assert address.is_tls is False

    def test_https_default_port(self):
        address = TargetAddress.from_url(TEST_TLS_URL)
        assert address.port == 443
        assert address.is_tls is True

    def test_http_default_port(self):
        assert TargetAddress.from_url("http://example.test/").port == 80

    def test_config_method_is_normalized(self):
        assert BenchmarkConfig(url=TEST_URL, method="patch").method == "PATCH"
