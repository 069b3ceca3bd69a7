"""
Writing statistics rows as tab-delimited text.
"""

from pathlib import Path
from typing import Iterable
import csv
import os
import tempfile

from ..models.features import OUTPUT_HEADER, StatisticsRow


def write_rows(output_file: Path, rows: Iterable[StatisticsRow]) -> int:
    """
    Write the header and one line per row to ``output_file``.

    Rows go to a temporary file in the same directory which replaces
    ``output_file`` only once every row is written.

    Returns:
        Number of rows written
    """
    output_file = Path(output_file)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_file.name}.", suffix=".tmp", dir=output_file.parent
    )
    written = 0
    try:
        with os.fdopen(fd, "w", newline="") as handle:
            writer = csv.writer(
                handle,
                delimiter="\t",
                quoting=csv.QUOTE_NONE,
                quotechar=None,
                lineterminator="\n",
            )
            writer.writerow(OUTPUT_HEADER)
            for row in rows:
                writer.writerow(row.to_fields())
                written += 1
        # mkstemp creates the file 0600; give it the mode open() would
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, output_file)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return written


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask
