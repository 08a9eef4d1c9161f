"""Generates visualizations from benchmark results."""
import logging
from pathlib import Path
from typing import Union

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .constants import BenchmarkConstants
from .models import ThroughputResults


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from benchmark results."""

    def plot_throughput(self, throughput: ThroughputResults, output_path: Union[Path, str]) -> None:
        """
        Plot requests and last response size per time bucket.

        Args:
            throughput: Throughput bucket snapshot.
            output_path: Path to save plot.
        """
        labels = list(BenchmarkConstants.BUCKET_LABELS)
        x = np.arange(len(labels))
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8))
        fig.suptitle("Throughput over the run", fontsize=14)

        bars = ax1.bar(x, throughput.requests, color='#1f77b4')
        ax1.set_title("Requests per time bucket")
        ax1.set_xticks(x)
        ax1.set_xticklabels(labels)
        ax1.set_ylabel("Requests")
        for bar, val in zip(bars, throughput.requests):
            ax1.text(bar.get_x() + bar.get_width()/2, bar.get_height(), f'{val}', ha='center', va='bottom', fontsize=8)

        ax2.bar(x, throughput.sizes, color='#ff7f0e')
        ax2.set_title("Last response size per time bucket")
        ax2.set_xticks(x)
        ax2.set_xticklabels(labels)
        ax2.set_xlabel("Elapsed share of the run")
        ax2.set_ylabel("Bytes")
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")
