"""
Identifier, name and label resolution from feature tags.

All functions here are total: they never raise and fall back to defined
defaults when a tag is missing.
"""

import re

from ..models.features import GenomicFeature


IDENTIFIER_TAGS = ("locus_tag", "ID", "systematic_id")
PSEUDOGENE_LABEL = "pseudogene"

_NON_WORD = re.compile(r"\W")


def feature_id(feature: GenomicFeature) -> str:
    """
    Identifier for a feature.

    Uses the first of ``locus_tag``, ``ID`` and ``systematic_id`` that is
    present, otherwise ``{sequence_id}_{strand}_{start}_{end}``.
    """
    for tag in IDENTIFIER_TAGS:
        value = feature.first_tag(tag)
        if value is not None:
            return value.strip("\"'")
    return f"{feature.sequence_id}_{feature.strand}_{feature.start}_{feature.end}"


def gene_name(feature: GenomicFeature) -> str:
    """The ``gene`` tag without non-word characters, else the identifier."""
    name = feature.first_tag("gene")
    if name is None:
        return feature_id(feature)
    return _NON_WORD.sub("", name)


def product_label(feature: GenomicFeature) -> str:
    if feature.has_tag("pseudo"):
        return PSEUDOGENE_LABEL
    return feature.first_tag("product") or ""


def is_rna(feature: GenomicFeature) -> bool:
    return feature.has_tag("ncRNA")
