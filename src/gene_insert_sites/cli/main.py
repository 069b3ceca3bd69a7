"""
Main command-line interface for the Gene Insert Sites pipeline.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
import click
import configparser
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config.settings import ANNOTATION_FORMATS, InsertSitesConfig
from ..core import annotation as annotation_reader
from ..core.feature_catalog import FeatureCatalog
from ..core.pipeline import InsertSitesPipeline
from ..exceptions import AnnotationReadError
from ..models.features import RunSummary
from ..utils import setup_logging
from .. import __version__


console = Console()

TRIM_RANGE = click.FloatRange(min=0.0, max=1.0, max_open=True)


@click.group()
@click.version_option(version=__version__, prog_name="Gene Insert Sites")
def cli():
    """Gene Insert Sites - per-gene transposon insertion statistics."""
    pass


@cli.command()
@click.argument(
    "annotation",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "plot_files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output-suffix",
    default=None,
    help="Suffix appended to output file names [default: tradis_gene_insert_sites.csv]",
    type=str,
)
@click.option(
    "--trim5",
    default=None,
    help="Fraction of each feature excluded at the 5' end [default: 0]",
    type=TRIM_RANGE,
)
@click.option(
    "--trim3",
    default=None,
    help="Fraction of each feature excluded at the 3' end [default: 0]",
    type=TRIM_RANGE,
)
@click.option(
    "-j", "--joined-output",
    is_flag=True,
    help="Merge all plot files and write a single joined output",
)
@click.option(
    "--output-dir",
    default=None,
    help="Directory for output files [default: current directory]",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--annotation-format",
    default=None,
    type=click.Choice(ANNOTATION_FORMATS, case_sensitive=False),
    help="Annotation file format [default: embl]",
)
@click.option(
    "--config",
    help="Configuration file path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    help="Log file path",
    type=click.Path(dir_okay=False, path_type=Path),
)
def run(
    annotation: Path,
    plot_files: List[Path],
    output_suffix: Optional[str],
    trim5: Optional[float],
    trim3: Optional[float],
    joined_output: bool,
    output_dir: Optional[Path],
    annotation_format: Optional[str],
    config: Optional[Path],
    log_level: str,
    log_file: Optional[Path],
):
    """Compute insertion statistics for every feature of ANNOTATION.

    Each PLOT_FILE holds forward and reverse insertion counts, one line per
    genomic position. One output is written per plot file, or a single
    joined output with --joined-output.
    """

    # Load configuration, CLI options override the configuration file
    try:
        settings: Dict[str, Any] = load_config_file(config) if config else {}
    except (configparser.Error, ValueError) as e:
        raise click.UsageError(f"Error reading configuration file {config}: {e}")

    overrides = {
        "output_suffix": output_suffix,
        "trim5": trim5,
        "trim3": trim3,
        "output_dir": output_dir,
        "annotation_format": annotation_format,
        "log_level": log_level,
        "log_file": log_file,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    if joined_output:
        settings["joined_output"] = True

    try:
        insert_sites_config = InsertSitesConfig(**settings)
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}")

    # Setup logging
    logger = setup_logging(
        log_level=insert_sites_config.log_level,
        log_file=insert_sites_config.log_file,
        log_format="console"
    )

    console.print(f"[bold blue]Gene Insert Sites v{__version__}[/bold blue]")
    console.print(f"Annotation: {annotation}")
    console.print(f"Plot files: {[str(p) for p in plot_files]}")

    try:
        pipeline = InsertSitesPipeline(insert_sites_config, logger)
        summary = pipeline.run(annotation, list(plot_files))
    except AnnotationReadError as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.error("Annotation could not be read", error=str(e))
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Pipeline failed: {e}[/red]")
        logger.error("Pipeline execution failed", error=str(e))
        sys.exit(1)

    display_results(summary)

    if not summary.succeeded:
        sys.exit(1)


@cli.command()
@click.argument(
    "annotation",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--annotation-format",
    default="embl",
    type=click.Choice(ANNOTATION_FORMATS, case_sensitive=False),
    help="Annotation file format",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
def catalog(annotation: Path, annotation_format: str, log_level: str):
    """Summarise the features of ANNOTATION that would be reported."""
    logger = setup_logging(log_level=log_level, log_format="console")

    try:
        feature_catalog = FeatureCatalog.from_features(
            annotation_reader.read_annotation(annotation, annotation_format.lower(), logger),
            logger
        )
    except AnnotationReadError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    table = Table(title="Feature Catalog")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Features", str(feature_catalog.total_count))
    table.add_row("Reported Features", str(feature_catalog.retained_count))
    table.add_row("Genes Within a CDS", str(feature_catalog.subsumed_count))
    table.add_row("CDS Intervals", str(len(feature_catalog.cds_intervals)))

    console.print(table)


def display_results(summary: RunSummary):
    """Display run results in a formatted table."""

    console.print("\n[bold green]Pipeline Results[/bold green]")

    table = Table(title="Outputs")
    table.add_column("Output", style="cyan")
    table.add_column("Plot Files", style="white")
    table.add_column("Rows", style="magenta")
    table.add_column("Skipped", style="yellow")

    for report in summary.reports:
        table.add_row(
            str(report.output_path),
            ", ".join(p.name for p in report.plot_files),
            str(report.rows_written),
            str(report.features_skipped),
        )

    console.print(table)

    if summary.succeeded:
        console.print("[green]✓ All plot files processed[/green]")
    else:
        for plot_file, error in summary.failed_inputs.items():
            console.print(f"[red]✗ {plot_file}: {error}[/red]")


def load_config_file(config_file_path: Path) -> Dict[str, Any]:
    """
    Handles loading of pipeline settings from a config.ini file.

    Only keys present in the file are returned, so defaults stay with
    InsertSitesConfig.
    """
    config_elem = configparser.ConfigParser()
    config_read = config_elem.read(config_file_path)
    # Raise an error if the file was specified but not found/readable
    if not config_read:
        raise ValueError(
            f"Configuration file not found or empty: {config_file_path}"
        )

    settings: Dict[str, Any] = {}
    if config_elem.has_section('Paths'):
        paths = config_elem['Paths']
        if 'OUTPUT_DIR' in paths:
            settings['output_dir'] = Path(paths['OUTPUT_DIR'])
    if config_elem.has_section('Parameters'):
        params = config_elem['Parameters']
        if 'OUTPUT_SUFFIX' in params:
            settings['output_suffix'] = params['OUTPUT_SUFFIX']
        if 'TRIM5' in params:
            settings['trim5'] = params.getfloat('TRIM5')
        if 'TRIM3' in params:
            settings['trim3'] = params.getfloat('TRIM3')
        if 'JOINED_OUTPUT' in params:
            settings['joined_output'] = params.getboolean('JOINED_OUTPUT')
        if 'ANNOTATION_FORMAT' in params:
            settings['annotation_format'] = params['ANNOTATION_FORMAT']
    return settings


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
