"""
Data models for the Gene Insert Sites pipeline.
"""

from .features import (
    OUTPUT_HEADER,
    FeatureKind,
    GenomicFeature,
    CDSInterval,
    StatisticsRow,
    OutputReport,
    RunSummary
)

__all__ = [
    "OUTPUT_HEADER",
    "FeatureKind",
    "GenomicFeature",
    "CDSInterval",
    "StatisticsRow",
    "OutputReport",
    "RunSummary"
]
