"""
Configuration settings for the Gene Insert Sites pipeline.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


DEFAULT_OUTPUT_SUFFIX = "tradis_gene_insert_sites.csv"
JOINED_OUTPUT_BASENAME = "joined_output"
PLOT_INFIX = ".insert_site_plot"
COMPRESSED_SUFFIX = ".gz"
ANNOTATION_FORMATS = ("embl", "genbank")


class InsertSitesConfig(BaseSettings):
    """Configuration for the Gene Insert Sites pipeline."""

    # Output
    output_dir: Path = Field(default=Path("."), description="Directory for output files")
    output_suffix: str = Field(
        default=DEFAULT_OUTPUT_SUFFIX,
        description="Suffix appended to each output file name"
    )
    joined_output: bool = Field(
        default=False,
        description="Merge all plot files into a single output"
    )

    # Parameters
    trim5: float = Field(default=0.0, description="Fraction of each feature trimmed from the 5' end")
    trim3: float = Field(default=0.0, description="Fraction of each feature trimmed from the 3' end")
    annotation_format: str = Field(default="embl", description="Annotation file format")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")

    @field_validator('trim5', 'trim3')
    @classmethod
    def validate_trim(cls, v):
        """Validate trim fractions lie in [0, 1)."""
        if not 0 <= v < 1:
            raise ValueError("Trim fractions must be at least 0 and less than 1")
        return v

    @field_validator('output_suffix')
    @classmethod
    def validate_output_suffix(cls, v):
        """Validate the suffix is a plain file name fragment."""
        if not v or "/" in v:
            raise ValueError("Output suffix must be a non-empty file name fragment")
        return v

    @field_validator('annotation_format')
    @classmethod
    def validate_annotation_format(cls, v):
        """Validate the annotation format is supported."""
        v = v.lower()
        if v not in ANNOTATION_FORMATS:
            raise ValueError(
                f"Annotation format must be one of: {', '.join(ANNOTATION_FORMATS)}"
            )
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate the logging level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return v

    model_config = {
        "env_prefix": "GENE_INSERT_SITES_",
        "case_sensitive": False,
        "env_file": ".env"
    }

    def get_output_path(self, plot_file: Path) -> Path:
        """
        Get the per-file output path for a plot file.

        The plot file's base name loses a trailing ``.gz`` and then a
        trailing ``.insert_site_plot`` before the suffix is appended.
        """
        name = Path(plot_file).name
        if name.endswith(COMPRESSED_SUFFIX):
            name = name[:-len(COMPRESSED_SUFFIX)]
        if name.endswith(PLOT_INFIX):
            name = name[:-len(PLOT_INFIX)]
        return self.output_dir / f"{name}.{self.output_suffix}"

    def get_joined_output_path(self) -> Path:
        """Get the output path used in joined mode."""
        return self.output_dir / f"{JOINED_OUTPUT_BASENAME}.{self.output_suffix}"

    def ensure_directories(self) -> None:
        """Ensure the output directory exists."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
