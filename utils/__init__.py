# utils/__init__.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Utility module exports
#
# The clock file reader depends on ``model`` and is imported directly as
# ``utils.clock_reader``; ``model`` itself logs through this package.

from .logger import (
    LogLevel,
    ClockLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "ClockLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
