"""
Gene Insert Sites

Per-gene transposon insertion statistics from insertion site plot files
and a genome annotation.
"""

__version__ = "1.0.0"
__author__ = "Bioinformatics Team"
__email__ = "team@example.com"

# Lazy imports to avoid dependency issues
def get_pipeline():
    """Get the InsertSitesPipeline class."""
    from .core.pipeline import InsertSitesPipeline
    return InsertSitesPipeline

def get_config():
    """Get the InsertSitesConfig class."""
    from .config.settings import InsertSitesConfig
    return InsertSitesConfig

def get_statistics_row():
    """Get the StatisticsRow class."""
    from .models.features import StatisticsRow
    return StatisticsRow

__all__ = ["get_pipeline", "get_config", "get_statistics_row"]
