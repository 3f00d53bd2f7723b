# utils/logger.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Logging utility for clock operations with configurable levels

import logging
import sys
from enum import Enum
from typing import Mapping, Optional, Sequence


class LogLevel(Enum):
    """Log levels for clock operations."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ClockLogger:
    """Centralized logger for vector clock operations with structured output."""

    def __init__(self, name: str = "vclocks", level: LogLevel = LogLevel.INFO):
        """Initialize the clock logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ClockFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

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

    # Specialized methods for clock events
    def clock_merged(self, receiver: str, sender: str, counters: Mapping[str, int]):
        """Log the state of a clock after merging a peer's clock."""
        state = ", ".join(f"{n}:{c}" for n, c in sorted(counters.items()))
        self.debug(f"    🔀 {receiver} merged state of {sender} → [{state}]")

    def tie_block(self, members: Sequence[str], independent: bool):
        """Log a run of clocks that tie under the causal comparator."""
        kind = "independent group" if independent else "equal clocks"
        self.debug(f"    🔗 Tie-block of {len(members)} ({kind}): {', '.join(members)}")

    def clocks_ordered(self, clock_count: int, entry_count: int):
        """Log the outcome of a batch ordering."""
        self.debug(f"  📐 Ordered {clock_count} clocks into {entry_count} entries")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class ClockFormatter(logging.Formatter):
    """Custom formatter for clock logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ClockLogger] = None


def get_logger(name: str = "vclocks") -> ClockLogger:
    """Get or create the global clock logger instance.

    Args:
        name: Logger name (default: "vclocks")

    Returns:
        ClockLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ClockLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level."""
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
