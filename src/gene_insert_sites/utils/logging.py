"""
Logging utilities for the Gene Insert Sites pipeline.
"""


from pathlib import Path
from structlog.stdlib import LoggerFactory
from typing import Any, Dict, Optional

import logging
import structlog
import sys
import time


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    log_format: str = "json"
) -> structlog.BoundLogger:
    """
    Set up structured logging for the pipeline.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        log_format: Log format ("json" or "console")

    Returns:
        Configured logger instance
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if log_format == "json" else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Make sure the log_file directory exists if it is not None
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="w")
    else:
        handler = logging.StreamHandler(sys.stdout)
    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    return structlog.get_logger("gene_insert_sites")


class PipelineLogger:
    """Context manager logging one pipeline operation with its duration."""

    def __init__(self, logger: structlog.BoundLogger, operation: str):
        """
        Initialize the pipeline logger.

        Args:
            logger: Structured logger instance
            operation: Name of the operation being logged
        """
        self.logger = logger
        self.operation = operation
        self.start_time = None
        self.context: Dict[str, Any] = {}

    def __enter__(self):
        """Enter the logging context."""
        self.start_time = time.time()
        self.logger.info(
            f"Starting {self.operation}",
            operation=self.operation,
            **self.context
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the logging context."""
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"Completed {self.operation}",
                operation=self.operation,
                duration_seconds=duration,
                status="success",
                **self.context
            )
        else:
            self.logger.error(
                f"Failed {self.operation}",
                operation=self.operation,
                duration_seconds=duration,
                status="error",
                error_type=exc_type.__name__,
                error_message=str(exc_val),
                **self.context
            )

    def add_context(self, **kwargs):
        """Add context information to the logger."""
        self.context.update(kwargs)
        return self

    def log_progress(self, message: str, **kwargs):
        """Log progress information."""
        self.logger.info(
            message,
            operation=self.operation,
            **{**self.context, **kwargs}
        )


def log_file_operation(logger: structlog.BoundLogger, operation: str, file_path: Path, **kwargs):
    """Log a file operation."""
    file_path = Path(file_path)
    logger.info(
        f"File {operation}",
        operation=operation,
        file_path=str(file_path),
        file_size_mb=file_path.stat().st_size / 1024 / 1024 if file_path.exists() else 0,
        **kwargs
    )


def log_error(logger: structlog.BoundLogger, error: Exception, context: Optional[Dict[str, Any]] = None):
    """Log an error with context."""
    logger.error(
        "Pipeline error",
        error_type=type(error).__name__,
        error_message=str(error),
        context=context or {}
    )
