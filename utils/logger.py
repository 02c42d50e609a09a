# utils/logger.py
# This file is part of Corvec - Correlation Vector tracing
#
# Logging utility for correlation vector operations with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for correlation vector operations."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CVLogger:
    """Centralized logger for correlation vector handling with structured output."""

    def __init__(self, name: str = "corvec", level: LogLevel = LogLevel.WARNING):
        """Initialize the correlation vector logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CVFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for vector lifecycle events
    def vector_created(self, cv: str, origin: str):
        """Log creation of a vector (fresh, seeded or parsed)."""
        self.debug(f"Created vector from {origin}: {cv}")

    def cutover(self, operation: str, serialized_length: int, proposed_length: int):
        """Log the one-way transition to the immutable state."""
        self.debug(
            f"    {operation} would grow vector to {proposed_length} bytes "
            f"(current {serialized_length}); vector is now immutable"
        )

    def mutation_dropped(self, operation: str):
        """Log a mutation ignored because the vector is already immutable."""
        self.debug(f"    {operation} ignored on immutable vector")

    def spin_value(self, ticks: int, entropy: bytes, width: int, value: int):
        """Log the composite value computed by spin."""
        self.debug(
            f"    spin: ticks={ticks} entropy={entropy.hex() or '-'} "
            f"width={width} value={value}"
        )


class CVFormatter(logging.Formatter):
    """Custom formatter with clean output for the command line."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CVLogger] = None


def get_logger(name: str = "corvec") -> CVLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "corvec")

    Returns:
        CVLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CVLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
