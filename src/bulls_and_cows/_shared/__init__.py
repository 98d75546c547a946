# Area: Shared
"""
Shared utilities.

This package contains:
- Logging configuration
- Logging formatters
"""

from .logging_config import (
    setup_logging,
    log_error,
    log_and_terminate,
)
from .logging_formatters import JSONFormatter, TerminalFormatter

__all__ = [
    "setup_logging",
    "log_error",
    "log_and_terminate",
    "JSONFormatter",
    "TerminalFormatter",
]
