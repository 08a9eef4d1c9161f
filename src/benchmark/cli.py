"""Command-line entry point for running a benchmark."""
import argparse
import json
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from src.const import APP_NAME, APP_VERSION, EXIT_CONFIGURATION_ERROR, EXIT_EXECUTION_ERROR, EXIT_OK, HTTP_METHODS
from src.shared.config import Config
from src.shared.logging import LoggingManager

from .builder import BenchmarkBuilder
from .exceptions import BenchmarkExecutionError, ConfigurationError
from .models import BenchmarkConfig
from .runner import BenchmarkRunner


logger = logging.getLogger(__name__)


def _split_pair_list(values: Optional[List[str]], separator: str, option: str) -> List[Tuple[str, str]]:
    pairs = []
    for value in values or []:
        key, found, item = value.partition(separator)
        if not found or not key.strip():
            raise ConfigurationError(f"{option} expects NAME{separator}VALUE, got {value!r}")
        pairs.append((key.strip(), item.strip()))
    return pairs


def _split_pairs(values: Optional[List[str]], separator: str, option: str) -> Dict[str, str]:
    return dict(_split_pair_list(values, separator, option))


def build_parser(settings: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="HTTP load testing with concurrent pipelined connections.")
    parser.add_argument("url", help="Target URL, e.g. http://localhost:8080/ping")
    parser.add_argument("-m", "--method", default="GET", type=str.upper, choices=HTTP_METHODS, help="Request method")
    parser.add_argument("-c", "--concurrency", type=int, default=settings.concurrency, help="Concurrent connections")
    parser.add_argument("-d", "--duration", type=int, default=settings.duration, help="Seconds to run")
    parser.add_argument("-p", "--pipeline", type=int, default=settings.pipeline, help="Requests in flight per connection")
    parser.add_argument("-t", "--timeout", type=int, default=settings.timeout, help="Per-request timeout in seconds")
    parser.add_argument("-H", "--header", action="append", metavar="NAME: VALUE", help="Request header (repeatable)")
    parser.add_argument("--cookie", action="append", metavar="NAME=VALUE", help="Request cookie (repeatable)")
    parser.add_argument("--content-type", help="Override the request Content-Type")
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--json", help="JSON document sent as the request body")
    body.add_argument("--form", action="append", metavar="NAME=VALUE", help="URL-encoded form field (repeatable)")
    body.add_argument("--file", action="append", metavar="FIELD=PATH", help="File sent as multipart/form-data (repeatable)")
    parser.add_argument("-o", "--output-dir", nargs="?", const=str(settings.output_dir),
                        help="Directory for CSV, JSON and PNG exports (configured directory when given without a value)")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def config_from_args(args: argparse.Namespace, settings: Config) -> BenchmarkConfig:
    """
    Turn parsed arguments into a benchmark configuration.

    Raises:
        ConfigurationError: If any argument is malformed or a file cannot be read.
    """
    builder = (
        BenchmarkBuilder(settings)
        .request(args.method, args.url)
        .concurrent(args.concurrency)
        .duration(args.duration)
        .pipeline(args.pipeline)
        .timeout(args.timeout)
        .with_header(_split_pairs(args.header, ":", "--header"))
        .with_cookies(_split_pairs(args.cookie, "=", "--cookie"))
    )
    if args.content_type:
        builder.with_content_type(args.content_type)

    if args.json is not None:
        try:
            builder.send_json(json.loads(args.json))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"--json is not valid JSON: {e}") from e
    elif args.form:
        builder.send_form_data(_split_pairs(args.form, "=", "--form"))
    elif args.file:
        for field_name, path in _split_pair_list(args.file, "=", "--file"):
            builder.send_file(field_name, path)

    return builder.build()


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = Config()
    args = build_parser(settings).parse_args(argv)
    LoggingManager.setup_logging(args.log_level)

    try:
        config = config_from_args(args, settings)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIGURATION_ERROR

    runner = BenchmarkRunner(config, output_dir=args.output_dir)
    try:
        runner.run()
    except BenchmarkExecutionError:
        return EXIT_EXECUTION_ERROR
    except KeyboardInterrupt:
        logger.warning("Benchmark interrupted")
        return EXIT_EXECUTION_ERROR
    return EXIT_OK
