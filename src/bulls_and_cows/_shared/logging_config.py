# Area: Shared
"""
bulls_and_cows._shared.logging_config — Structured logging setup
================================================================

Configures dual logging: terminal (colored, stderr) + file (JSON).
The terminal handler defaults to WARNING so log lines do not mix
with the game's own console output.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .logging_formatters import JSONFormatter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import BullsAndCowsError

# Package logger
logger = logging.getLogger("bulls_and_cows")


def setup_logging(
    log_file_path: Optional[str] = "bulls_and_cows.log",
    level: int = logging.INFO,
    terminal_level: int = logging.WARNING,
    use_colors: bool = True,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Level of the package logger and the file handler.
    terminal_level : int
        Level of the stderr handler.
    use_colors : bool
        Color level names on the terminal.
    """
    pkg_logger = logging.getLogger("bulls_and_cows")
    pkg_logger.setLevel(min(level, terminal_level))

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(terminal_level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
        use_colors=use_colors,
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_error(error: "BullsAndCowsError") -> None:
    """Log a package error with its details."""
    format_log = getattr(error, "format_error_log", None)
    message = format_log() if format_log else str(error)
    logger.error(message, extra={"error_type": error.__class__.__name__})


def log_and_terminate(error: "BullsAndCowsError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : BullsAndCowsError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_error(error)
    logger.critical("Process terminated due to error")
    sys.exit(exit_code)
