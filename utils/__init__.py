# utils/__init__.py
# This file is part of Corvec - Correlation Vector tracing
#
# Utility module exports

from .logger import (
    LogLevel,
    CVLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "CVLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
