# utils/clock_reader.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Clock file reader for collections of observed vector clocks

from pathlib import Path
from typing import Iterator

from model.vector_clock import VectorClock
from parser import ParseError, parse_clock
from utils.logger import get_logger


class ClockFileError(Exception):
    """Exception raised when clock files contain invalid format or data."""

    pass


def read_clocks(filepath: str) -> Iterator[VectorClock]:
    """Read clocks from a text file, one clock per line.

    Each line holds either the JSON wire form or the compact notation.
    Blank lines and lines starting with ``#`` are skipped.

    Expected format:
        # collected from three nodes
        {"id":"A","clocks":{"A":2,"B":1}}
        B[A:1, B:1]
        C[A:1, B:1, C:1]

    Args:
        filepath: Path to the clock file

    Yields:
        VectorClock: Parsed clocks in file order

    Raises:
        ClockFileError: If the file is missing or a line cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ClockFileError(f"Clock file not found: {filepath}")

    logger.debug(f"Reading clock file: {filepath}")

    try:
        with open(path, "rb") as file:
            for line_num, raw in enumerate(file, start=1):
                try:
                    line = raw.decode("utf-8").strip()
                except UnicodeDecodeError as e:
                    raise ClockFileError(f"Error decoding line {line_num} as UTF-8: {e}") from e

                if not line or line.startswith("#"):
                    continue

                try:
                    vc = _parse_clock_line(line)
                except ParseError as e:
                    raise ClockFileError(f"Error parsing line {line_num}: {e}") from e

                logger.debug(f"Parsed clock {vc!r} from line {line_num}")
                yield vc

    except OSError as e:
        raise ClockFileError(f"Cannot read clock file: {filepath} ({e})") from e


def validate_clock_file(filepath: str) -> int:
    """Validate a clock file by parsing every line.

    Args:
        filepath: Path to the clock file to validate

    Returns:
        Number of clocks in the file

    Raises:
        ClockFileError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating clock file: {filepath}")

    try:
        count = sum(1 for _ in read_clocks(filepath))
    except ClockFileError as e:
        logger.debug(f"Clock file validation failed: {e}")
        raise

    logger.validation_result(True, f"Clock file validation successful: {count} clocks")
    return count


def _parse_clock_line(line: str) -> VectorClock:
    """Parse a single non-empty line as wire form or compact notation."""
    if line.startswith("{"):
        return VectorClock(line)
    return parse_clock(line)
