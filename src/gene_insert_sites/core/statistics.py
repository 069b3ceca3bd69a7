"""
Per-feature insertion statistics over a strand-aware trimmed interval.
"""

from typing import Tuple
import math
import numpy as np

from ..exceptions import EmptyIntervalError, ProfileTooShortError
from ..models.features import GenomicFeature, StatisticsRow
from . import metadata


def trimmed_interval(feature: GenomicFeature, trim5: float, trim3: float) -> Tuple[int, int]:
    """
    Interval left after trimming, as 1-based inclusive ``(start, end)``.

    Trim fractions apply in transcription direction, so on the reverse
    strand the 5' trim comes off the high coordinate end.
    """
    length = feature.length
    five_prime = math.floor(trim5 * length)
    three_prime = math.floor(trim3 * length)
    if feature.strand == 1:
        return feature.start + five_prime, feature.end - three_prime
    return feature.start + three_prime, feature.end - five_prime


def compute(
    feature: GenomicFeature,
    profile: np.ndarray,
    trim5: float = 0.0,
    trim3: float = 0.0
) -> StatisticsRow:
    """
    Compute the statistics row of a feature.

    Args:
        feature: Annotated feature
        profile: Combined insertion counts, position 1 in slot 0
        trim5: Fraction of the feature excluded at its 5' end
        trim3: Fraction of the feature excluded at its 3' end

    Returns:
        StatisticsRow for the feature

    Raises:
        EmptyIntervalError: trimming leaves no positions
        ProfileTooShortError: the trimmed interval ends past the profile
    """
    identifier = metadata.feature_id(feature)
    read_start, read_end = trimmed_interval(feature, trim5, trim3)
    if read_end < read_start:
        raise EmptyIntervalError(identifier, read_start, read_end)
    if read_end > len(profile):
        raise ProfileTooShortError(identifier, read_end, len(profile))

    window = profile[read_start - 1:read_end]
    insertion_count = int(np.count_nonzero(window))

    return StatisticsRow(
        feature_id=identifier,
        gene_name=metadata.gene_name(feature),
        is_rna=metadata.is_rna(feature),
        start=feature.start,
        end=feature.end,
        strand=feature.strand,
        read_count=int(window.sum()),
        insertion_index=insertion_count / (read_end - read_start + 1),
        feature_length=feature.length,
        insertion_count=insertion_count,
        product_label=metadata.product_label(feature),
    )
