"""
Feature catalog: CDS intervals and the filter for genes duplicated by a CDS.
"""

from typing import Iterable, List, Optional
import structlog

from ..models.features import CDSInterval, FeatureKind, GenomicFeature


def build(features: Iterable[GenomicFeature]) -> List[CDSInterval]:
    """Collect the coordinates of every CDS, in annotation order."""
    return [
        CDSInterval(start=feature.start, end=feature.end)
        for feature in features
        if feature.kind == FeatureKind.CDS
    ]


def retain(feature: GenomicFeature, cds_intervals: Iterable[CDSInterval]) -> bool:
    """
    Whether a feature is reported.

    A gene lying entirely within a CDS (identical coordinates included) is
    the same element annotated twice and is dropped. CDS and polypeptide
    features are always kept.
    """
    if feature.kind != FeatureKind.GENE:
        return True
    return not any(interval.contains(feature) for interval in cds_intervals)


class FeatureCatalog:
    """Features of one annotation, with the subsumed genes filtered out."""

    def __init__(self, features: List[GenomicFeature], cds_intervals: List[CDSInterval]):
        self.features = features
        self.cds_intervals = cds_intervals
        self._retained = [f for f in features if retain(f, cds_intervals)]

    @classmethod
    def from_features(
        cls,
        features: Iterable[GenomicFeature],
        logger: Optional[structlog.BoundLogger] = None
    ) -> "FeatureCatalog":
        """
        Build a catalog from a feature stream.

        The stream is consumed once; the catalog can then be replayed for
        any number of outputs.
        """
        features = list(features)
        catalog = cls(features, build(features))
        if logger is not None:
            logger.info(
                "Feature catalog built",
                total_features=catalog.total_count,
                retained_features=catalog.retained_count,
                subsumed_genes=catalog.subsumed_count,
                cds_intervals=len(catalog.cds_intervals)
            )
        return catalog

    def retained_features(self) -> List[GenomicFeature]:
        return list(self._retained)

    @property
    def total_count(self) -> int:
        return len(self.features)

    @property
    def retained_count(self) -> int:
        return len(self._retained)

    @property
    def subsumed_count(self) -> int:
        return self.total_count - self.retained_count
