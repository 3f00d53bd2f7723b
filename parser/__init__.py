# parser/__init__.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Compact clock notation parsing and formatting

"""Compact, human-readable notation for vector clocks.

A clock is written as its owner followed by its counters, sorted by node
identifier::

    A[A:2, B:1]

The notation is what clock files and log lines use; nodes exchange the JSON
wire form produced by ``VectorClock.serialize`` instead.

Core Functions:
    parse_clock: Converts notation into a VectorClock
    format_clock: Renders a VectorClock in notation

Example:
    >>> from parser import parse_clock, format_clock
    >>> vc = parse_clock("B[A:1, B:1]")
    >>> format_clock(vc.increment())
    'B[A:1, B:2]'
"""

import re

from .exceptions import ParseError
from .grammar import _ClockParser
from .lexer import _NODE_PATTERN
from utils.logger import get_logger


def parse_clock(source: str):
    """Parse compact notation into a new VectorClock.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Notation string such as ``A[A:2, B:1]``

    Returns:
        VectorClock owned by the leading node identifier

    Raises:
        ParseError: Notation is malformed or repeats a node
    """
    from model.vector_clock import VectorClock

    node_id, counters = _ClockParser().parse(source)
    get_logger().debug(f"Parsed clock for node {node_id} with {len(counters)} counters")
    return VectorClock({"id": node_id, "clocks": counters})


def format_clock(clock) -> str:
    """Render a clock in compact notation, counters sorted by node id.

    Raises:
        ValueError: The owner or a counter key is not a valid notation
            identifier (e.g. starts with a digit), so the result could not
            be parsed back
    """
    for node in (clock.id, *clock.clocks):
        if not re.fullmatch(_NODE_PATTERN, node):
            raise ValueError(f"Node id {node!r} cannot be written in clock notation")

    items = ", ".join(f"{node}:{count}" for node, count in sorted(clock.clocks.items()))
    return f"{clock.id}[{items}]"


__all__ = ["parse_clock", "format_clock", "ParseError"]
