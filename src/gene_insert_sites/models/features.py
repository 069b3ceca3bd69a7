"""
Data models for annotated features and the statistics computed over them.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


OUTPUT_HEADER = [
    "locus_tag",
    "gene_name",
    "ncrna",
    "start",
    "end",
    "strand",
    "read_count",
    "ins_index",
    "gene_length",
    "ins_count",
    "fcn",
]


class FeatureKind(str, Enum):
    """Annotation feature keys that are summarised."""

    GENE = "gene"
    CDS = "CDS"
    POLYPEPTIDE = "polypeptide"


class GenomicFeature(BaseModel):
    """An annotated feature with 1-based inclusive coordinates."""

    model_config = ConfigDict(frozen=True)

    kind: FeatureKind = Field(description="Feature key")
    start: int = Field(description="Start position (1-based, inclusive)")
    end: int = Field(description="End position (1-based, inclusive)")
    strand: int = Field(description="Strand, 1 or -1")
    tags: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Qualifier name to its values, in annotation order"
    )
    sequence_id: str = Field(default="", description="Sequence the feature lies on")

    @field_validator('start')
    @classmethod
    def validate_start(cls, v):
        """Validate that positions are 1-based."""
        if v < 1:
            raise ValueError("Feature start must be at least 1")
        return v

    @field_validator('strand')
    @classmethod
    def validate_strand(cls, v):
        """Validate that strand is 1 or -1."""
        if v not in (1, -1):
            raise ValueError("Strand must be 1 or -1")
        return v

    @model_validator(mode='after')
    def validate_end_after_start(self):
        """Validate that end is not before start."""
        if self.end < self.start:
            raise ValueError("Feature end must not be before its start")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def has_tag(self, name: str) -> bool:
        return name in self.tags

    def first_tag(self, name: str) -> Optional[str]:
        """First value of a tag, or None when the tag is absent or empty."""
        values = self.tags.get(name)
        if not values:
            return None
        return values[0]


class CDSInterval(BaseModel):
    """Coordinates of a CDS feature."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    def contains(self, feature: GenomicFeature) -> bool:
        return self.start <= feature.start and self.end >= feature.end


class StatisticsRow(BaseModel):
    """Insertion statistics for one feature."""

    model_config = ConfigDict(frozen=True)

    feature_id: str = Field(description="Locus tag or synthesized identifier")
    gene_name: str = Field(description="Gene name with non-word characters removed")
    is_rna: bool = Field(default=False, description="Whether the feature is an ncRNA")
    start: int = Field(description="Feature start")
    end: int = Field(description="Feature end")
    strand: int = Field(description="Feature strand")
    read_count: int = Field(description="Reads within the trimmed interval")
    insertion_index: float = Field(description="Insertion sites per trimmed base")
    feature_length: int = Field(description="Untrimmed feature length")
    insertion_count: int = Field(description="Positions with at least one insertion")
    product_label: str = Field(default="", description="Product or 'pseudogene'")

    @field_validator('read_count', 'insertion_count')
    @classmethod
    def validate_counts(cls, v):
        """Validate that counts are non-negative."""
        if v < 0:
            raise ValueError("Counts must be non-negative")
        return v

    @field_validator('insertion_index')
    @classmethod
    def validate_insertion_index(cls, v):
        """Validate that the insertion index is a fraction."""
        if not 0 <= v <= 1:
            raise ValueError("Insertion index must be between 0 and 1")
        return v

    def to_fields(self) -> List[str]:
        """Output cells in header order."""
        return [
            _clean_text(self.feature_id),
            _clean_text(self.gene_name),
            "1" if self.is_rna else "0",
            str(self.start),
            str(self.end),
            str(self.strand),
            str(self.read_count),
            str(self.insertion_index),
            str(self.feature_length),
            str(self.insertion_count),
            _clean_text(self.product_label),
        ]


class OutputReport(BaseModel):
    """Summary of one written output file."""

    output_path: Path = Field(description="Written statistics file")
    plot_files: List[Path] = Field(description="Plot files the profile was built from")
    rows_written: int = Field(default=0, description="Number of statistics rows")
    features_skipped: int = Field(default=0, description="Features skipped on data errors")


class RunSummary(BaseModel):
    """Outcome of a whole run across all outputs."""

    reports: List[OutputReport] = Field(default_factory=list)
    failed_inputs: Dict[str, str] = Field(
        default_factory=dict,
        description="Plot file to error message for inputs that could not be processed"
    )

    @property
    def succeeded(self) -> bool:
        return not self.failed_inputs


def _clean_text(value: str) -> str:
    # Output is tab-delimited and unquoted
    return value.replace("\t", " ").replace("\r", " ").replace("\n", " ")
