"""
Main pipeline class for the Gene Insert Sites pipeline.
"""

from pathlib import Path
from typing import Dict, Any, Iterator, List
import numpy as np
import structlog

from ..config.settings import InsertSitesConfig
from ..exceptions import DataError, PlotFormatError, PlotReadError
from ..models.features import OutputReport, RunSummary, StatisticsRow
from ..utils import PipelineLogger, log_error, log_file_operation
from . import annotation, output, plot_loader, statistics
from .feature_catalog import FeatureCatalog


class InsertSitesPipeline:
    """Computes per-feature insertion statistics for one annotation."""

    def __init__(self, config: InsertSitesConfig, logger: structlog.BoundLogger):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration
            logger: Structured logger instance
        """
        self.config = config
        self.logger = logger

        self.config.ensure_directories()

        self.logger.info("Pipeline initialized successfully",
                         config_summary=self._get_config_summary())

    def load_catalog(self, annotation_file: Path) -> FeatureCatalog:
        """
        Read an annotation once into a reusable feature catalog.

        Raises:
            AnnotationReadError: the annotation cannot be read
        """
        with PipelineLogger(self.logger, "load_annotation") as plog:
            plog.add_context(annotation_file=str(annotation_file))
            features = annotation.read_annotation(
                annotation_file,
                self.config.annotation_format,
                self.logger
            )
            return FeatureCatalog.from_features(features, self.logger)

    def run(self, annotation_file: Path, plot_files: List[Path]) -> RunSummary:
        """
        Run the pipeline in the configured mode.

        Args:
            annotation_file: EMBL or GenBank annotation
            plot_files: One or more insertion site plot files

        Returns:
            RunSummary with one report per written output
        """
        if not plot_files:
            raise ValueError("At least one plot file is required")

        catalog = self.load_catalog(annotation_file)

        if self.config.joined_output:
            return self.run_joined(catalog, plot_files)
        return self.run_per_file(catalog, plot_files)

    def run_per_file(self, catalog: FeatureCatalog, plot_files: List[Path]) -> RunSummary:
        """
        Write one output per plot file.

        A plot file that cannot be read is recorded as failed and the
        remaining files are still processed.
        """
        summary = RunSummary()
        for plot_file in plot_files:
            plot_file = Path(plot_file)
            try:
                report = self._write_output(
                    catalog,
                    [plot_file],
                    self.config.get_output_path(plot_file)
                )
            except (PlotReadError, PlotFormatError, OSError) as e:
                log_error(self.logger, e, {"plot_file": str(plot_file)})
                summary.failed_inputs[str(plot_file)] = str(e)
                continue
            summary.reports.append(report)
        return summary

    def run_joined(self, catalog: FeatureCatalog, plot_files: List[Path]) -> RunSummary:
        """Merge every plot file into one profile and write a single output."""
        summary = RunSummary()
        plot_files = [Path(p) for p in plot_files]
        try:
            report = self._write_output(
                catalog,
                plot_files,
                self.config.get_joined_output_path()
            )
        except (PlotReadError, PlotFormatError, OSError) as e:
            log_error(self.logger, e, {"plot_files": [str(p) for p in plot_files]})
            failed = getattr(e, "path", None)
            for plot_file in ([failed] if failed is not None else plot_files):
                summary.failed_inputs[str(plot_file)] = str(e)
            return summary
        summary.reports.append(report)
        return summary

    def compute_rows(self, catalog: FeatureCatalog, profile: np.ndarray) -> Iterator[StatisticsRow]:
        """
        Yield a statistics row for every retained feature, in annotation order.

        Features whose trimmed interval is empty or runs past the profile
        are skipped with a warning.
        """
        for feature in catalog.retained_features():
            try:
                yield statistics.compute(
                    feature,
                    profile,
                    self.config.trim5,
                    self.config.trim3
                )
            except DataError as e:
                self.logger.warning(
                    "Skipping feature",
                    feature_id=e.feature_id,
                    error_type=type(e).__name__,
                    error_message=str(e)
                )

    def _write_output(
        self,
        catalog: FeatureCatalog,
        plot_files: List[Path],
        output_file: Path
    ) -> OutputReport:
        with PipelineLogger(self.logger, f"write_{output_file.name}") as plog:
            plog.add_context(
                plot_files=[str(p) for p in plot_files],
                output_file=str(output_file)
            )

            profile = plot_loader.load_many(plot_files, self.logger)
            plog.log_progress("Insertion profile loaded", positions=len(profile))

            rows = list(self.compute_rows(catalog, profile))
            written = output.write_rows(output_file, rows)
            log_file_operation(self.logger, "written", output_file, rows=written)

            return OutputReport(
                output_path=output_file,
                plot_files=plot_files,
                rows_written=written,
                features_skipped=catalog.retained_count - written
            )

    def _get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of the configuration."""
        return {
            "output_dir": str(self.config.output_dir),
            "output_suffix": self.config.output_suffix,
            "joined_output": self.config.joined_output,
            "trim5": self.config.trim5,
            "trim3": self.config.trim3,
            "annotation_format": self.config.annotation_format,
        }
