"""
Utility modules for the Gene Insert Sites pipeline.
"""

from .logging import (
    setup_logging,
    PipelineLogger,
    log_file_operation,
    log_error,
)

__all__ = [
    "setup_logging",
    "PipelineLogger",
    "log_file_operation",
    "log_error",
]
