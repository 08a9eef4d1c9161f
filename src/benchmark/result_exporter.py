"""Handles exporting benchmark results to various formats."""
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd

from .constants import BenchmarkConstants
from .models import LatencyResults, RunSummary, ThroughputResults


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to various formats."""

    @staticmethod
    def save_latency_results(latency: LatencyResults, output_path: Union[Path, str]) -> None:
        """
        Save latency statistics to CSV, one row per statistic.

        Args:
            latency: Finalized latency statistics.
            output_path: Path to save CSV.
        """
        values = asdict(latency)
        count = values.pop("count")
        df = pd.DataFrame({"stat": list(values.keys()), "latency_ms": list(values.values())})
        df["samples"] = count
        df.to_csv(output_path, index=False)
        logger.info(f"Latency CSV saved: {output_path}")

    @staticmethod
    def save_throughput_results(throughput: ThroughputResults, output_path: Union[Path, str]) -> None:
        """
        Save the throughput buckets to CSV, one row per time bucket.

        Args:
            throughput: Throughput bucket snapshot.
            output_path: Path to save CSV.
        """
        df = pd.DataFrame({
            "bucket": list(BenchmarkConstants.BUCKET_LABELS),
            "cut_point_s": throughput.cut_points,
            "requests": throughput.requests,
            "last_size_bytes": throughput.sizes,
        })
        df.to_csv(output_path, index=False)
        logger.info(f"Throughput CSV saved: {output_path}")

    @staticmethod
    def save_run_summary(summary: RunSummary, output_path: Union[Path, str]) -> None:
        """Save the whole run summary as JSON."""
        with open(output_path, "w") as f:
            json.dump(asdict(summary), f, indent=2)
        logger.info(f"Run summary saved: {output_path}")

    @staticmethod
    def load_run_summary(input_path: Union[Path, str]) -> Dict[str, Any]:
        """
        Load a run summary written by ``save_run_summary``.

        Args:
            input_path: Path of the JSON file.

        Returns:
            The summary as plain dictionaries.
        """
        with open(input_path, "r") as f:
            summary = json.load(f)
        logger.info(f"Run summary loaded: {input_path}")
        return summary

    @staticmethod
    def load_throughput_results(input_path: Union[Path, str]) -> pd.DataFrame:
        """Load throughput buckets written by ``save_throughput_results``."""
        return pd.read_csv(input_path)

    @classmethod
    def export_all(cls, summary: RunSummary, output_dir: Union[Path, str]) -> Dict[str, Path]:
        """
        Write every export of ``summary`` into ``output_dir``.

        Returns:
            Paths written, keyed by export kind.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = {}
        if summary.latency is not None:
            written["latency"] = output_dir / BenchmarkConstants.LATENCY_CSV
            cls.save_latency_results(summary.latency, written["latency"])
        else:
            logger.warning("No latency samples available for saving")

        written["throughput"] = output_dir / BenchmarkConstants.THROUGHPUT_CSV
        cls.save_throughput_results(summary.throughput, written["throughput"])

        written["summary"] = output_dir / BenchmarkConstants.SUMMARY_JSON
        cls.save_run_summary(summary, written["summary"])
        return written
