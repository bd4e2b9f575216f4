"""
Logging Configuration

Structured console (and optional file) logging shared by every module:
- Structured output for parsing
- Timing of batch operations
- Per-call context via ``extra={"context": ...}``
- Environment-based levels (LOG_LEVEL, LOG_FILE)
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional
import os


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter.

    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {context}
    """

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, 'context', None)

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        base_msg = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if context:
            base_msg += f" {context}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        return base_msg


class PerformanceLogger:
    """Context manager that logs how long an operation took."""

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 1000):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time:
            self.duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

            if self.duration_ms > self.threshold_ms:
                self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms")
            else:
                self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL or INFO
        log_file: Optional file path for logs. Defaults to LOG_FILE if set

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers on re-import (Streamlit reruns)
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO').upper()
    if log_file is None:
        log_file = os.getenv('LOG_FILE') or None

    log_level = getattr(logging, level, logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 1000):
    """
    Get a performance logger context manager.

    Usage:
        with get_perf_logger(logger, "evaluate_many", threshold_ms=500):
            outcomes = [...]
    """
    return PerformanceLogger(logger, operation, threshold_ms)
