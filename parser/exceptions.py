# parser/exceptions.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Custom exceptions for clock deserialization and notation parsing

"""Domain-specific exceptions for reading vector clocks.

A clock can reach this package in two textual shapes: the JSON wire form
exchanged between nodes and the compact notation used in logs and clock
files. Both readers report malformed input through the same exception so
callers can treat a bad message uniformly.
"""


class ParseError(RuntimeError):
    """Exception raised when a clock representation is not well-formed.

    Covers wrong top-level shapes, empty identifiers, counters that are not
    non-negative integers, and syntax errors in the compact notation.
    """

    pass
