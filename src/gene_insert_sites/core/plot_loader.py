"""
Loading of insertion site plot files into per-position count profiles.
"""

from pathlib import Path
from typing import IO, Iterable, Optional
import gzip
import zlib
import numpy as np
import structlog

from ..exceptions import PlotFormatError, PlotReadError
from ..utils import log_file_operation


INITIAL_CAPACITY = 1 << 16


def open_plot_file(plot_file: Path) -> IO[str]:
    """Open a plot file for reading, decompressing ``.gz`` files."""
    plot_file = Path(plot_file)
    if plot_file.suffix == ".gz":
        return gzip.open(plot_file, 'rt')
    return open(plot_file, 'r')


def load(plot_file: Path, logger: Optional[structlog.BoundLogger] = None) -> np.ndarray:
    """
    Read a plot file into an insertion profile.

    Line ``n`` of the file holds the forward and reverse strand insertion
    counts at position ``n``; the profile holds their sum, with position 1
    in slot 0.

    Args:
        plot_file: Plain or gzip compressed plot file
        logger: Optional logger instance

    Returns:
        1-D integer array of combined counts
    """
    plot_file = Path(plot_file)
    counts = np.zeros(INITIAL_CAPACITY, dtype=np.int64)
    positions = 0
    try:
        with open_plot_file(plot_file) as handle:
            for line_number, line in enumerate(handle, start=1):
                if positions == len(counts):
                    counts = np.resize(counts, 2 * len(counts))
                counts[positions] = _parse_line(plot_file, line_number, line)
                positions += 1
    except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
        raise PlotReadError(plot_file, str(e)) from e

    if logger is not None:
        log_file_operation(logger, "read", plot_file, positions=positions)

    return counts[:positions].copy()


def merge_into(
    existing: np.ndarray,
    plot_file: Path,
    logger: Optional[structlog.BoundLogger] = None
) -> np.ndarray:
    """
    Add the counts of a plot file to an existing profile.

    The result is as long as the longer of the two; positions present in
    only one input keep that input's count.
    """
    incoming = load(plot_file, logger)
    merged = np.zeros(max(len(existing), len(incoming)), dtype=np.int64)
    merged[:len(existing)] += existing
    merged[:len(incoming)] += incoming
    return merged


def load_many(
    plot_files: Iterable[Path],
    logger: Optional[structlog.BoundLogger] = None
) -> np.ndarray:
    """Merge several plot files into one profile, in the order given."""
    profile = np.zeros(0, dtype=np.int64)
    for plot_file in plot_files:
        profile = merge_into(profile, plot_file, logger)
    return profile


def _parse_line(plot_file: Path, line_number: int, line: str) -> int:
    fields = line.split()
    if len(fields) != 2:
        raise PlotFormatError(plot_file, line_number, line.rstrip("\n"))
    try:
        forward, reverse = int(fields[0]), int(fields[1])
    except ValueError:
        raise PlotFormatError(plot_file, line_number, line.rstrip("\n"))
    if forward < 0 or reverse < 0:
        raise PlotFormatError(plot_file, line_number, line.rstrip("\n"))
    return forward + reverse
