"""Constants for PipeBench."""

# Default run configuration values
DEFAULT_CONCURRENCY = 10
DEFAULT_DURATION = 10
DEFAULT_PIPELINE = 1
DEFAULT_TIMEOUT = 10
DEFAULT_OUTPUT_DIR = "bench"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "urllib3.connectionpool": "ERROR",
    "matplotlib": "WARNING",
}

# HTTP status codes
HTTP_SUCCESS = 200
HTTP_REDIRECT = 300

# Supported request methods
HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

# URL schemes
SCHEME_HTTP = "http"
SCHEME_HTTPS = "https"
DEFAULT_PORTS = {
    SCHEME_HTTP: 80,
    SCHEME_HTTPS: 443,
}

# HTTP headers
CONTENT_TYPE_HEADER = "Content-Type"
USER_AGENT_HEADER = "User-Agent"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# File names
CONFIG_FILE_NAME = "config.json"

# CLI exit codes
EXIT_OK = 0
EXIT_EXECUTION_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2

APP_NAME = "pipebench"
APP_VERSION = "0.1.0"
