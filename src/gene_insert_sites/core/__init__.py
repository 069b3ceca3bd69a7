"""
Core pipeline modules for the Gene Insert Sites pipeline.
"""

from .pipeline import InsertSitesPipeline
from .feature_catalog import FeatureCatalog

# Import submodules
from . import annotation
from . import feature_catalog
from . import metadata
from . import output
from . import plot_loader
from . import statistics

__all__ = [
    "InsertSitesPipeline",
    "FeatureCatalog",
    "annotation",
    "feature_catalog",
    "metadata",
    "output",
    "plot_loader",
    "statistics",
]
