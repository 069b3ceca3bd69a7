"""
Command-line interface for the Gene Insert Sites pipeline.
"""

from .main import cli, main

__all__ = ["cli", "main"]
