"""Main entry point for PipeBench."""

import sys

from src.benchmark.cli import main


if __name__ == "__main__":
    sys.exit(main())
