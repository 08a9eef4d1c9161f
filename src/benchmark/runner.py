"""Benchmark runner to orchestrate a run and its output."""
from pathlib import Path
from typing import Optional, Union
import logging

from .constants import BenchmarkConstants
from .load_runner import LoadRunner, TransportFactory
from .models import BenchmarkConfig, RunSummary
from .reporter import ConsoleReporter
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Runs a benchmark, prints the report and optionally exports the results."""

    def __init__(self, config: BenchmarkConfig, output_dir: Optional[Union[Path, str]] = None,
                 reporter: Optional[ConsoleReporter] = None, transport_factory: Optional[TransportFactory] = None):
        self.config = config
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.reporter = reporter or ConsoleReporter()
        self.load_runner = LoadRunner(config, transport_factory=transport_factory)
        self.result_exporter = ResultExporter()
        self.visualization_generator = VisualizationGenerator()

    def run(self) -> RunSummary:
        """Run the complete benchmarking process."""
        try:
            self.reporter.banner(self.config)
            summary = self.load_runner.run()
            self.reporter.report(summary)

            if self.output_dir is not None:
                self.result_exporter.export_all(summary, self.output_dir)
                graph_path = self.output_dir / BenchmarkConstants.THROUGHPUT_GRAPH
                self.visualization_generator.plot_throughput(summary.throughput, graph_path)

            logger.info("Benchmark completed successfully!")
            return summary

        except Exception as e:
            logger.error(f"Benchmark failed: {e}", stack_info=True)
            raise
