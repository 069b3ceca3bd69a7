"""
Exceptions raised while computing gene insert site statistics.
"""

from pathlib import Path
from typing import Optional


class GeneInsertSitesError(Exception):
    """Base class for all errors raised by this package."""


class AnnotationReadError(GeneInsertSitesError, IOError):
    """The annotation file could not be opened or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read annotation {self.path}: {reason}")


class PlotReadError(GeneInsertSitesError, IOError):
    """A plot file could not be opened or decompressed."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read plot file {self.path}: {reason}")


class PlotFormatError(GeneInsertSitesError, ValueError):
    """A plot file line does not hold two non-negative integers."""

    def __init__(self, path: Path, line_number: int, line: str):
        self.path = Path(path)
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"{self.path}:{line_number}: expected two non-negative integers, "
            f"got {line!r}"
        )


class DataError(GeneInsertSitesError, ValueError):
    """A feature cannot be summarised against the insertion profile."""

    def __init__(self, message: str, feature_id: Optional[str] = None):
        self.feature_id = feature_id
        super().__init__(message)


class EmptyIntervalError(DataError):
    """Trimming left an empty or inverted interval."""

    def __init__(self, feature_id: str, read_start: int, read_end: int):
        self.read_start = read_start
        self.read_end = read_end
        super().__init__(
            f"Trimmed interval [{read_start}, {read_end}] of {feature_id} is empty",
            feature_id=feature_id,
        )


class ProfileTooShortError(DataError):
    """The trimmed interval reaches past the end of the insertion profile."""

    def __init__(self, feature_id: str, read_end: int, profile_length: int):
        self.read_end = read_end
        self.profile_length = profile_length
        super().__init__(
            f"Trimmed interval of {feature_id} ends at {read_end} but the "
            f"insertion profile only covers {profile_length} positions",
            feature_id=feature_id,
        )
