"""
Configuration management for the Gene Insert Sites pipeline.
"""

# Lazy import to avoid dependency issues
def get_config():
    """Get the InsertSitesConfig class."""
    from .settings import InsertSitesConfig
    return InsertSitesConfig

__all__ = ["get_config"]
